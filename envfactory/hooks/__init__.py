"""Lifecycle hooks for the test factory.

Key components:
- HookEvent: the three lifecycle events
- FactoryCallbacks: base class with no-op ``on_*`` methods to override
- HookRegistry: registry of plain callables per event
- HookManager: dispatches an event to callbacks, then registered callables
"""

from .base import FactoryCallbacks, Hook
from .events import HookEvent
from .manager import HookManager
from .registry import (
    HookRegistry,
    get_hook_registry,
    register_hook,
    reset_hook_registry,
    unregister_hook,
)


__all__ = [
    "FactoryCallbacks",
    "Hook",
    "HookEvent",
    "HookManager",
    "HookRegistry",
    "get_hook_registry",
    "register_hook",
    "reset_hook_registry",
    "unregister_hook",
]
