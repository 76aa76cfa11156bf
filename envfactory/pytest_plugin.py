"""pytest fixtures wrapping the test factory lifecycle.

Enable with ``pytest_plugins = ["envfactory.pytest_plugin"]`` in a
``conftest.py``. Logging is left to the consuming suite; call
:func:`envfactory.core.logging.setup_logging` from its own
``pytest_configure`` to render factory events.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from envfactory.config.settings import FactorySettings
from envfactory.factory import TestFactory, get_shared_factory


@pytest.fixture
def env_factory() -> Generator[TestFactory, None, None]:
    """The shared factory, set up before the test and torn down after it."""
    factory = get_shared_factory()
    factory.set_up()
    try:
        yield factory
    finally:
        factory.tear_down()


@pytest.fixture
def isolated_factory(tmp_path: Path) -> Generator[TestFactory, None, None]:
    """A private factory whose store and cache live under ``tmp_path``.

    Does not touch the shared factory's configuration, but still clears the
    process-wide shared instances on set-up and tear-down.
    """
    settings = FactorySettings(
        store_dir=tmp_path / "stores",
        cache_dir=tmp_path / "cache",
    )
    factory = TestFactory(settings=settings)
    factory.set_up()
    try:
        yield factory
    finally:
        factory.tear_down()
