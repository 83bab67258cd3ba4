"""Response model, error envelope and exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

from ._debug import mask_proxy_password


@dataclass
class Response:
    """Raw HTTP response as returned by a backend.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers.
        content: Full response body as bytes.
        url: Final URL of the request.
        elapsed: Request duration in seconds.
        proxy: Proxy URL the request was routed through, if any.
    """

    status_code: int
    headers: dict[str, str]
    content: bytes
    url: str
    elapsed: float = 0.0
    proxy: str | None = field(default=None, repr=False)

    @property
    def text(self) -> str:
        """Decode content as UTF-8 text."""
        return self.content.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= self.status_code < 300


class APIStatus(BaseModel):
    """Error envelope returned by the API on non-2xx responses."""

    status_code: int = 0
    status_message: str = ""


class TMDbError(Exception):
    """Base exception for client errors."""
    pass


class TransportError(TMDbError):
    """Error during HTTP transport (connection, DNS, TLS, timeout)."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class BodyReadError(TransportError):
    """Connection succeeded but the response body could not be read."""
    pass


class DecodeError(TMDbError):
    """Response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.original_error = original_error


class APIError(TMDbError):
    """Error reported by the API through its status envelope."""

    def __init__(self, status_code: int, status_message: str, http_status: int):
        super().__init__(f"code ({status_code}): {status_message}")
        self.status_code = status_code
        self.status_message = status_message
        self.http_status = http_status


class ProxyConfigurationError(TMDbError, ValueError):
    """Raised when a proxy in the pool cannot be turned into a valid URL."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid proxy URL '{mask_proxy_password(url)}': {reason}")
