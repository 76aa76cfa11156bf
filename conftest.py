"""Top-level pytest configuration for plugin fixture registration.

This file centralizes `pytest_plugins` to comply with pytest's requirement
that plugin declarations live in a top-level conftest located at the rootdir.
"""

# Factory lifecycle fixtures (env_factory, isolated_factory)
pytest_plugins = [
    "envfactory.pytest_plugin",
    # In-process runs of the fixtures themselves
    "pytester",
]
