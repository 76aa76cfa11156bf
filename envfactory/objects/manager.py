"""Object manager mapping JSON resources onto pydantic models."""

from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from envfactory.core.errors import MappingNotFoundError
from envfactory.http.client import APIClient
from envfactory.storage.store import ObjectStore


logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ObjectManager:
    """Loads and sends pydantic models through an :class:`APIClient`.

    Resource paths are mapped to model classes with :meth:`register_mapping`.
    When an ``object_store`` is attached, loaded objects can be persisted by
    passing ``collection`` to :meth:`load_object`.
    """

    def __init__(
        self, client: APIClient, object_store: ObjectStore | None = None
    ) -> None:
        self.client = client
        self.object_store = object_store
        self._mappings: dict[str, type[BaseModel]] = {}

        if get_shared_manager() is None:
            set_shared_manager(self)

        logger.debug(
            "object_manager_created",
            base_url=str(client.base_url),
            category="lifecycle",
        )

    @property
    def base_url(self) -> str:
        return str(self.client.base_url)

    @property
    def mappings(self) -> dict[str, type[BaseModel]]:
        return dict(self._mappings)

    def register_mapping(self, path: str, model: type[BaseModel]) -> None:
        """Map responses from ``path`` onto ``model``."""
        self._mappings[path] = model

    def mapping_for_path(self, path: str) -> type[BaseModel]:
        resource_path = path.split("?", 1)[0]
        model = self._mappings.get(resource_path)
        if model is None:
            raise MappingNotFoundError(resource_path)
        return model

    def load_object(
        self,
        path: str,
        model: type[ModelT] | None = None,
        *,
        collection: str | None = None,
        key_field: str = "id",
    ) -> Any:
        """GET ``path`` and validate the JSON body into model instances.

        A JSON array yields a list of models. HTTP errors raise
        :class:`httpx.HTTPStatusError` and validation errors raise
        :class:`pydantic.ValidationError`.
        """
        target = model or self.mapping_for_path(path)

        response = self.client.get(path)
        response.raise_for_status()
        payload = response.json()

        if isinstance(payload, list):
            objects = [target.model_validate(item) for item in payload]
        else:
            objects = [target.model_validate(payload)]

        if collection is not None and self.object_store is not None:
            for obj in objects:
                key = str(getattr(obj, key_field))
                self.object_store.save(collection, key, obj)

        logger.debug(
            "objects_loaded",
            path=path,
            model=target.__name__,
            count=len(objects),
            category="mapping",
        )
        return objects if isinstance(payload, list) else objects[0]

    def post_object(self, path: str, obj: BaseModel) -> Any:
        """POST a model as JSON and return the decoded response body."""
        response = self.client.post(path, json=obj.model_dump(mode="json"))
        response.raise_for_status()
        return response.json() if response.content else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"


# Shared instance management
_shared_manager: ObjectManager | None = None


def get_shared_manager() -> ObjectManager | None:
    """Return the current shared object manager, if any."""
    return _shared_manager


def set_shared_manager(manager: ObjectManager | None) -> None:
    """Replace the shared object manager. ``None`` clears it."""
    global _shared_manager
    _shared_manager = manager


def reset_shared_manager() -> None:
    """Clear the shared object manager (mainly for testing)."""
    global _shared_manager

    if _shared_manager is not None:
        _shared_manager = None
        logger.debug("shared_object_manager_cleared", category="lifecycle")
