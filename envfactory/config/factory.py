"""Construction settings read by the factory on every builder call."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from envfactory.http.client import APIClient
from envfactory.objects.manager import ObjectManager

from .settings import DEFAULT_BASE_URL


ClientFactory = Callable[[Any], APIClient]
ManagerFactory = Callable[[APIClient], ObjectManager]


class FactoryConfiguration(BaseModel):
    """Base URL and the constructors used to build clients and managers.

    The base URL is stored as given. It is only parsed when a client is built
    from it, so a bad value fails at that point and not here.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL passed to the client constructor",
    )

    client_factory: ClientFactory = Field(
        default=APIClient,
        description="Callable taking a base URL and returning a client",
    )

    manager_factory: ManagerFactory = Field(
        default=ObjectManager,
        description="Callable taking a client and returning an object manager",
    )
