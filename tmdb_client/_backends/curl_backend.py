"""curl_cffi-based HTTP backend with TLS fingerprinting."""

from __future__ import annotations

from typing import Mapping

from ..models import Response, TransportError

# Optional curl_cffi import
try:
    from curl_cffi import CurlError
    from curl_cffi.requests import Session
    CURL_AVAILABLE = True
except ImportError:
    CURL_AVAILABLE = False
    CurlError = None
    Session = None


class CurlBackend:
    """curl_cffi wrapper with browser impersonation.

    curl sessions are not thread-safe, so every request opens its own
    session. The body is read eagerly by curl, so read failures surface as
    :class:`TransportError`.
    """

    def __init__(
        self,
        impersonate: str = "chrome",
        timeout: float = 30.0,
        verify_ssl: bool = True,
        follow_redirects: bool = True,
        headers: Mapping[str, str] | None = None,
    ):
        """Initialize curl backend.

        Args:
            impersonate: curl_cffi impersonate target (e.g. "chrome", "safari17_0").
            timeout: Default request timeout in seconds.
            verify_ssl: Whether to verify SSL certificates.
            follow_redirects: Whether to follow redirects.
            headers: Headers sent with every request.

        Raises:
            ImportError: If curl_cffi is not installed.
        """
        if not CURL_AVAILABLE:
            raise ImportError(
                "curl_cffi is required for curl backend. "
                "Install with: pip install 'tmdb-client[curl]'"
            )

        self._impersonate = impersonate
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._follow_redirects = follow_redirects
        self._headers = dict(headers) if headers else {}

    def get(self, url: str, proxy: str | None = None) -> Response:
        """Execute a GET request and read the whole body.

        Args:
            url: Request URL.
            proxy: Proxy URL, or None for a direct connection.

        Returns:
            Response object.

        Raises:
            TransportError: On connection/transport errors.
        """
        try:
            with Session(
                impersonate=self._impersonate,
                timeout=self._timeout,
                verify=self._verify_ssl,
            ) as session:
                resp = session.get(
                    url,
                    headers=self._headers or None,
                    proxies={"all": proxy} if proxy else None,
                    allow_redirects=self._follow_redirects,
                )
        except CurlError as e:
            raise TransportError(str(e), original_error=e) from e

        return Response(
            status_code=resp.status_code,
            headers={k: v for k, v in resp.headers.items() if v is not None},
            content=resp.content,
            url=str(resp.url),
            elapsed=resp.elapsed if isinstance(resp.elapsed, float) else resp.elapsed.total_seconds(),
            proxy=proxy,
        )

    def close(self) -> None:
        """Nothing to release; sessions are scoped to a single request."""
