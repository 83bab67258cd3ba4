"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping, Sequence

from .safety.proxy_pool import Proxy

BASE_URL = "https://api.themoviedb.org/3"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for a TMDb client.

    The configuration is frozen once created. ``proxies`` is copied into a
    tuple, so later changes to the caller's list do not reach the client.

    Attributes:
        api_key: TMDb v3 API key, sent as the ``api_key`` query parameter.
        use_proxy: Route requests through the proxy pool. Only takes effect
                   when more than one proxy is configured.
        proxies: Proxy records to rotate across.
        backend: HTTP backend - "httpx" (default) or "curl" (curl_cffi).
        base_url: API root URL.
        timeout: Total request timeout in seconds.
        verify_ssl: Whether to verify SSL certificates.
        follow_redirects: Whether to follow HTTP redirects.
        http2: Whether the httpx backend negotiates HTTP/2.
        impersonate: Browser target for the curl backend.
        headers: Headers sent with every request (read-only copy).
    """

    api_key: str
    use_proxy: bool = False
    proxies: Sequence[Proxy] = ()

    # Transport
    backend: Literal["httpx", "curl"] = "httpx"
    base_url: str = BASE_URL
    timeout: float = 30.0
    verify_ssl: bool = True
    follow_redirects: bool = True
    http2: bool = True
    impersonate: str = "chrome"

    headers: Mapping[str, str] = field(
        default_factory=lambda: {"Accept": "application/json"}, hash=False
    )

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.api_key:
            raise ValueError("api_key must be a non-empty string")
        if self.backend not in ("httpx", "curl"):
            raise ValueError("backend must be 'httpx' or 'curl'")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if not self.base_url:
            raise ValueError("base_url must be a non-empty string")

        object.__setattr__(self, "proxies", tuple(self.proxies or ()))
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
