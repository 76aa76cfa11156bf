from .store import (
    ObjectStore,
    get_default_store,
    reset_default_store,
    set_default_store,
)


__all__ = [
    "ObjectStore",
    "get_default_store",
    "reset_default_store",
    "set_default_store",
]
