from .client import (
    APIClient,
    get_shared_client,
    reset_shared_client,
    set_shared_client,
)


__all__ = [
    "APIClient",
    "get_shared_client",
    "reset_shared_client",
    "set_shared_client",
]
