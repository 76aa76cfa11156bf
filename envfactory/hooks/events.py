"""Event definitions for factory lifecycle hooks."""

from enum import Enum


class HookEvent(str, Enum):
    """Lifecycle moments at which the factory notifies hooks"""

    FACTORY_INITIALIZED = "factory.initialized"
    FACTORY_SET_UP = "factory.set_up"
    FACTORY_TORN_DOWN = "factory.torn_down"
