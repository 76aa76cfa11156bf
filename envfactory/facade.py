"""Module-level aliases for the shared test factory.

Each function resolves :func:`~envfactory.factory.get_shared_factory` and
delegates to the matching instance operation, so test code never has to hold
the factory itself.
"""

import httpx

from envfactory.config.factory import ClientFactory, ManagerFactory
from envfactory.factory import get_shared_factory
from envfactory.http.client import APIClient
from envfactory.objects.manager import ObjectManager
from envfactory.storage.store import ObjectStore


__all__ = [
    "base_url",
    "build_client",
    "build_object_manager",
    "build_object_store",
    "client_factory",
    "manager_factory",
    "parsed_base_url",
    "set_base_url",
    "set_client_factory",
    "set_manager_factory",
    "set_up",
    "tear_down",
]


def set_up() -> None:
    get_shared_factory().set_up()


def tear_down() -> None:
    get_shared_factory().tear_down()


def base_url() -> str:
    return get_shared_factory().base_url


def parsed_base_url() -> httpx.URL:
    return get_shared_factory().parsed_base_url


def set_base_url(url: str | httpx.URL) -> None:
    get_shared_factory().base_url = url


def client_factory() -> ClientFactory:
    return get_shared_factory().client_factory


def set_client_factory(factory: ClientFactory) -> None:
    get_shared_factory().client_factory = factory


def manager_factory() -> ManagerFactory:
    return get_shared_factory().manager_factory


def set_manager_factory(factory: ManagerFactory) -> None:
    get_shared_factory().manager_factory = factory


def build_client() -> APIClient:
    return get_shared_factory().build_client()


def build_object_manager() -> ObjectManager:
    return get_shared_factory().build_object_manager()


def build_object_store() -> ObjectStore:
    return get_shared_factory().build_object_store()
