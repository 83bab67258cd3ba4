"""Internal backend implementations for TMDb."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .httpx_backend import HttpxBackend
from .curl_backend import CurlBackend, CURL_AVAILABLE

if TYPE_CHECKING:
    from ..config import ClientConfig


def create_backend(config: ClientConfig) -> HttpxBackend | CurlBackend:
    """Build the HTTP backend selected by ``config.backend``."""
    if config.backend == "curl":
        return CurlBackend(
            impersonate=config.impersonate,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            follow_redirects=config.follow_redirects,
            headers=config.headers,
        )
    return HttpxBackend(
        timeout=config.timeout,
        verify_ssl=config.verify_ssl,
        http2=config.http2,
        follow_redirects=config.follow_redirects,
        headers=config.headers,
    )


__all__ = ["HttpxBackend", "CurlBackend", "CURL_AVAILABLE", "create_backend"]
