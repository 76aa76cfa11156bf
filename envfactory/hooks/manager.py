"""Hook dispatch for the test factory.

The HookManager runs the installed ``FactoryCallbacks`` method for an event
followed by every callable registered for it. Hooks run synchronously in the
caller's thread. A failing hook is logged and its exception is re-raised so
the test that triggered the lifecycle step fails.
"""

import structlog

from .base import FactoryCallbacks, Hook
from .events import HookEvent
from .registry import HookRegistry, get_hook_registry


class HookManager:
    """Emits lifecycle events to callbacks and registered hooks."""

    def __init__(
        self, callbacks: FactoryCallbacks, registry: HookRegistry | None = None
    ):
        """Initialize the hook manager.

        Args:
            callbacks: Callback object whose methods run before registered hooks
            registry: Registry supplying plain callable hooks; the global
                registry is looked up on each emit when omitted
        """
        self.callbacks = callbacks
        self._registry = registry
        self._logger = structlog.get_logger(__name__)

    @property
    def registry(self) -> HookRegistry:
        if self._registry is not None:
            return self._registry
        return get_hook_registry()

    def emit(self, event: HookEvent) -> None:
        """Invoke every hook for ``event`` in order."""
        hooks: list[Hook] = [self.callbacks.hook_for(event)]
        hooks.extend(self.registry.get_hooks(event))

        for hook in hooks:
            try:
                hook()
            except Exception as e:
                self._logger.error(
                    "hook_failed",
                    hook=getattr(hook, "__qualname__", repr(hook)),
                    hook_event=event.value,
                    error=str(e),
                    category="hooks",
                )
                raise

        self._logger.debug(
            "hooks_emitted", hook_event=event.value, count=len(hooks), category="hooks"
        )
