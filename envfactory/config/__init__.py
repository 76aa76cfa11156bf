"""Configuration for the test environment factory."""

from .factory import FactoryConfiguration
from .logging import LoggingSettings
from .settings import DEFAULT_BASE_URL, FactorySettings


__all__ = [
    "DEFAULT_BASE_URL",
    "FactoryConfiguration",
    "FactorySettings",
    "LoggingSettings",
]
