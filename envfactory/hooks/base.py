"""Callback base class for customizing the factory lifecycle."""

from collections.abc import Callable

from .events import HookEvent


Hook = Callable[[], None]


class FactoryCallbacks:
    """Application extension points invoked by the test factory.

    Every method is a no-op. Subclass and override the ones you need, then
    install the instance with ``set_callbacks()`` or pass it to
    ``TestFactory(callbacks=...)``.
    """

    def on_initialize(self) -> None:
        """Called once when a factory instance is created."""

    def on_set_up(self) -> None:
        """Called at the end of every ``set_up()``."""

    def on_tear_down(self) -> None:
        """Called at the end of every ``tear_down()``."""

    def hook_for(self, event: HookEvent) -> Hook:
        return {
            HookEvent.FACTORY_INITIALIZED: self.on_initialize,
            HookEvent.FACTORY_SET_UP: self.on_set_up,
            HookEvent.FACTORY_TORN_DOWN: self.on_tear_down,
        }[event]
