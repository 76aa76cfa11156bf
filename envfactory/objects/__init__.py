from .manager import (
    ObjectManager,
    get_shared_manager,
    reset_shared_manager,
    set_shared_manager,
)


__all__ = [
    "ObjectManager",
    "get_shared_manager",
    "reset_shared_manager",
    "set_shared_manager",
]
