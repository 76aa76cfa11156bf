"""Unit tests for the hook registry and manager."""

from unittest.mock import MagicMock

import pytest

from envfactory.hooks import (
    FactoryCallbacks,
    HookEvent,
    HookManager,
    HookRegistry,
    get_hook_registry,
    register_hook,
    reset_hook_registry,
    unregister_hook,
)


@pytest.fixture
def hook_registry() -> HookRegistry:
    """Create a fresh hook registry for testing."""
    return HookRegistry()


@pytest.fixture
def hook_manager(hook_registry: HookRegistry) -> HookManager:
    """Create a hook manager with no-op callbacks and the test registry."""
    return HookManager(FactoryCallbacks(), hook_registry)


@pytest.mark.unit
class TestHookRegistry:
    def test_register_and_get(self, hook_registry: HookRegistry) -> None:
        hook = MagicMock()

        hook_registry.register(HookEvent.FACTORY_SET_UP, hook)

        assert hook_registry.get_hooks(HookEvent.FACTORY_SET_UP) == [hook]
        assert hook_registry.get_hooks(HookEvent.FACTORY_TORN_DOWN) == []

    def test_unregister(self, hook_registry: HookRegistry) -> None:
        hook = MagicMock()
        hook_registry.register(HookEvent.FACTORY_SET_UP, hook)

        hook_registry.unregister(HookEvent.FACTORY_SET_UP, hook)
        hook_registry.unregister(HookEvent.FACTORY_SET_UP, hook)

        assert hook_registry.get_hooks(HookEvent.FACTORY_SET_UP) == []

    def test_rejects_non_callable(self, hook_registry: HookRegistry) -> None:
        with pytest.raises(TypeError):
            hook_registry.register(HookEvent.FACTORY_SET_UP, "not callable")  # type: ignore[arg-type]

    def test_get_hooks_returns_copy(self, hook_registry: HookRegistry) -> None:
        hook_registry.register(HookEvent.FACTORY_SET_UP, MagicMock())

        hook_registry.get_hooks(HookEvent.FACTORY_SET_UP).clear()

        assert len(hook_registry.get_hooks(HookEvent.FACTORY_SET_UP)) == 1

    def test_global_registry_helpers(self) -> None:
        hook = MagicMock()

        returned = register_hook(HookEvent.FACTORY_INITIALIZED, hook)
        assert returned is hook
        assert get_hook_registry().get_hooks(HookEvent.FACTORY_INITIALIZED) == [hook]

        unregister_hook(HookEvent.FACTORY_INITIALIZED, hook)
        assert get_hook_registry().get_hooks(HookEvent.FACTORY_INITIALIZED) == []

    def test_reset_hook_registry(self) -> None:
        register_hook(HookEvent.FACTORY_SET_UP, MagicMock())
        old_registry = get_hook_registry()

        reset_hook_registry()

        assert get_hook_registry() is not old_registry
        assert get_hook_registry().get_hooks(HookEvent.FACTORY_SET_UP) == []


@pytest.mark.unit
class TestHookManager:
    def test_emit_without_hooks_is_noop(self, hook_manager: HookManager) -> None:
        for event in HookEvent:
            hook_manager.emit(event)

    def test_emit_calls_matching_callback_method(
        self, hook_registry: HookRegistry
    ) -> None:
        callbacks = MagicMock(spec=FactoryCallbacks)
        callbacks.hook_for.side_effect = lambda event: FactoryCallbacks.hook_for(
            callbacks, event
        )
        manager = HookManager(callbacks, hook_registry)

        manager.emit(HookEvent.FACTORY_TORN_DOWN)

        callbacks.on_tear_down.assert_called_once_with()
        callbacks.on_set_up.assert_not_called()
        callbacks.on_initialize.assert_not_called()

    def test_emit_calls_registered_hooks_in_order(
        self, hook_manager: HookManager, hook_registry: HookRegistry
    ) -> None:
        calls: list[str] = []
        hook_registry.register(HookEvent.FACTORY_SET_UP, lambda: calls.append("a"))
        hook_registry.register(HookEvent.FACTORY_SET_UP, lambda: calls.append("b"))

        hook_manager.emit(HookEvent.FACTORY_SET_UP)

        assert calls == ["a", "b"]

    def test_failing_hook_stops_emission(
        self, hook_manager: HookManager, hook_registry: HookRegistry
    ) -> None:
        later = MagicMock()
        hook_registry.register(
            HookEvent.FACTORY_SET_UP, MagicMock(side_effect=ValueError("boom"))
        )
        hook_registry.register(HookEvent.FACTORY_SET_UP, later)

        with pytest.raises(ValueError, match="boom"):
            hook_manager.emit(HookEvent.FACTORY_SET_UP)
        later.assert_not_called()

    def test_uses_global_registry_when_none_given(self) -> None:
        manager = HookManager(FactoryCallbacks())
        hook = MagicMock()

        register_hook(HookEvent.FACTORY_SET_UP, hook)
        manager.emit(HookEvent.FACTORY_SET_UP)

        hook.assert_called_once_with()
        assert manager.registry is get_hook_registry()

    def test_default_callbacks_are_noops(self) -> None:
        callbacks = FactoryCallbacks()

        assert callbacks.on_initialize() is None
        assert callbacks.on_set_up() is None
        assert callbacks.on_tear_down() is None
