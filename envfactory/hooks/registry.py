"""Registry of plain callables attached to lifecycle events"""

from collections import defaultdict

import structlog

from .base import Hook
from .events import HookEvent


class HookRegistry:
    """Registry of hooks keyed by event, kept in registration order"""

    def __init__(self) -> None:
        self._hooks: dict[HookEvent, list[Hook]] = defaultdict(list)
        self._logger = structlog.get_logger(__name__)

    def register(self, event: HookEvent, hook: Hook) -> None:
        """Register a hook for an event"""
        if not callable(hook):
            raise TypeError(f"Hook for {event.value} must be callable")
        self._hooks[event].append(hook)
        self._logger.debug(
            "hook_registered",
            hook=getattr(hook, "__name__", repr(hook)),
            hook_event=event.value,
            category="hooks",
        )

    def unregister(self, event: HookEvent, hook: Hook) -> None:
        """Remove a hook from an event; unknown hooks are ignored"""
        if hook in self._hooks[event]:
            self._hooks[event].remove(hook)

    def get_hooks(self, event: HookEvent) -> list[Hook]:
        """Get all hooks for an event"""
        return list(self._hooks.get(event, []))

    def clear(self) -> None:
        self._hooks.clear()


# Global registry instance
_registry: HookRegistry | None = None


def get_hook_registry() -> HookRegistry:
    """Get the process-wide hook registry.

    Hooks registered here before the shared factory exists still observe its
    initialization.
    """
    global _registry
    if _registry is None:
        _registry = HookRegistry()
    return _registry


def register_hook(event: HookEvent, hook: Hook) -> Hook:
    """Register ``hook`` on the global registry and return it unchanged."""
    get_hook_registry().register(event, hook)
    return hook


def unregister_hook(event: HookEvent, hook: Hook) -> None:
    get_hook_registry().unregister(event, hook)


def reset_hook_registry() -> None:
    """Drop all globally registered hooks (mainly for testing)."""
    global _registry
    if _registry:
        _registry.clear()
    _registry = HookRegistry()
