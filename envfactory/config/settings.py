"""Environment-driven defaults for the test environment factory.

Every value can be overridden with an ``ENVFACTORY_`` prefixed environment
variable, using ``__`` for nested settings (``ENVFACTORY_LOGGING__LEVEL``).
"""

import tempfile
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LoggingSettings


__all__ = ["DEFAULT_BASE_URL", "FactorySettings"]


DEFAULT_BASE_URL = "http://127.0.0.1:4567"
DEFAULT_STORE_FILENAME = "envfactory-test-store.json"


def _default_work_dir() -> Path:
    return Path(tempfile.gettempdir()) / "envfactory"


class FactorySettings(BaseSettings):
    """Settings the factory reads when it first builds its configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ENVFACTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL for clients and object managers built by the factory",
    )

    store_dir: Path = Field(
        default_factory=lambda: _default_work_dir() / "stores",
        description="Directory holding object store files",
    )

    store_filename: str = Field(
        default=DEFAULT_STORE_FILENAME,
        description="Filename of the object store rebuilt by build_object_store()",
    )

    cache_dir: Path = Field(
        default_factory=lambda: _default_work_dir() / "cache",
        description="Response cache directory wiped on every set_up()",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    @field_validator("store_filename")
    @classmethod
    def validate_store_filename(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"store_filename must be a bare filename, got {v!r}")
        return v

    @property
    def store_path(self) -> Path:
        return self.store_dir / self.store_filename
