from ._version import __version__
from .factory import (
    TestFactory,
    get_shared_factory,
    reset_shared_factory,
    set_callbacks,
)


# Alias matching the accessor name used in the factory documentation
shared_factory = get_shared_factory

__all__ = [
    "TestFactory",
    "__version__",
    "get_shared_factory",
    "reset_shared_factory",
    "set_callbacks",
    "shared_factory",
]
