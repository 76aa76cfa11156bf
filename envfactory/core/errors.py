"""Exceptions raised by envfactory and its baseline collaborators."""


class EnvFactoryError(Exception):
    """Base exception for all envfactory errors."""

    pass


class ConfigurationError(EnvFactoryError):
    """Raised when factory configuration is missing or unusable."""

    pass


class InvalidBaseURLError(ConfigurationError):
    """Raised when a client is constructed from a base URL it cannot use."""

    def __init__(self, base_url: str, reason: str) -> None:
        self.base_url = base_url
        self.reason = reason
        super().__init__(f"Invalid base URL {base_url!r}: {reason}")


class ObjectStoreError(EnvFactoryError):
    """Raised when the object store cannot be read or written."""

    pass


class MappingNotFoundError(EnvFactoryError):
    """Raised when the object manager has no model registered for a path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No object mapping registered for path {path!r}")
