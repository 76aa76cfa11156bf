"""Baseline HTTP client built by the test factory.

``APIClient`` is a thin wrapper around :class:`httpx.Client` bound to a base
URL. The first client constructed in a process becomes the shared client
unless one is already set; the factory clears that registration between
tests.
"""

from typing import Any

import httpx
import structlog

from envfactory.core.errors import InvalidBaseURLError


logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 5.0


def _parse_base_url(base_url: str | httpx.URL) -> httpx.URL:
    raw = str(base_url)
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise InvalidBaseURLError(raw, str(e)) from e

    if url.scheme not in ("http", "https"):
        raise InvalidBaseURLError(raw, "scheme must be http or https")
    if not url.host:
        raise InvalidBaseURLError(raw, "missing host")
    return url


class APIClient:
    """HTTP client bound to a single base URL."""

    def __init__(
        self,
        base_url: str | httpx.URL,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = _parse_base_url(base_url)
        self._http = httpx.Client(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout,
            headers=headers,
        )

        if get_shared_client() is None:
            set_shared_client(self)

        logger.debug(
            "api_client_created", base_url=str(self.base_url), category="http"
        )

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request relative to the base URL."""
        response = self._http.request(method, path, **kwargs)
        logger.debug(
            "api_client_request",
            method=method,
            url=str(response.request.url),
            status_code=response.status_code,
            category="http",
        )
        return response

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        """Close the underlying connection pool. Safe to call twice."""
        if not self._http.is_closed:
            self._http.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={str(self.base_url)!r})"


# Shared instance management
_shared_client: APIClient | None = None


def get_shared_client() -> APIClient | None:
    """Return the current shared client, if any."""
    return _shared_client


def set_shared_client(client: APIClient | None) -> None:
    """Replace the current shared client. ``None`` clears it."""
    global _shared_client
    _shared_client = client


def reset_shared_client() -> None:
    """Close and clear the shared client (mainly for testing)."""
    global _shared_client

    if _shared_client is not None:
        _shared_client.close()
        _shared_client = None
        logger.debug("shared_api_client_cleared", category="lifecycle")
