"""httpx-based HTTP backend."""

from __future__ import annotations

import threading
import time
from typing import Mapping

import httpx

from ..models import BodyReadError, Response, TransportError


class HttpxBackend:
    """Simple httpx wrapper for GET requests.

    Direct requests share one lazily-created client. Each proxied request
    gets its own client bound to the selected proxy.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        http2: bool = True,
        follow_redirects: bool = True,
        headers: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize httpx backend.

        Args:
            timeout: Default request timeout in seconds.
            verify_ssl: Whether to verify SSL certificates.
            http2: Whether to use HTTP/2.
            follow_redirects: Whether to follow redirects.
            headers: Headers sent with every request.
            transport: Custom transport for direct requests (mainly for tests).
        """
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._http2 = http2
        self._follow_redirects = follow_redirects
        self._headers = dict(headers) if headers else {}
        self._transport = transport
        self._sync_client: httpx.Client | None = None
        self._lock = threading.Lock()

    def _new_client(self, proxy: str | None = None) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout,
            verify=self._verify_ssl,
            http2=self._http2,
            follow_redirects=self._follow_redirects,
            headers=self._headers,
            proxy=proxy,
            transport=None if proxy else self._transport,
            trust_env=False,
        )

    def _get_sync_client(self) -> httpx.Client:
        """Get or create the shared direct client (lazy initialization)."""
        with self._lock:
            if self._sync_client is None:
                self._sync_client = self._new_client()
            return self._sync_client

    def get(self, url: str, proxy: str | None = None) -> Response:
        """Execute a GET request and read the whole body.

        Args:
            url: Request URL.
            proxy: Proxy URL, or None for a direct connection.

        Returns:
            Response object.

        Raises:
            TransportError: If the request could not be sent.
            BodyReadError: If the body could not be read.
        """
        if proxy:
            with self._new_client(proxy) as client:
                return self._execute(client, url, proxy)
        return self._execute(self._get_sync_client(), url, None)

    def _execute(self, client: httpx.Client, url: str, proxy: str | None) -> Response:
        start = time.perf_counter()
        try:
            resp = client.send(client.build_request("GET", url), stream=True)
        except httpx.HTTPError as e:
            raise TransportError(str(e), original_error=e) from e

        try:
            content = resp.read()
        except httpx.HTTPError as e:
            raise BodyReadError(str(e), original_error=e) from e
        finally:
            resp.close()

        return Response(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=content,
            url=str(resp.url),
            elapsed=time.perf_counter() - start,
            proxy=proxy,
        )

    def close(self) -> None:
        """Close the shared direct client."""
        with self._lock:
            if self._sync_client:
                self._sync_client.close()
                self._sync_client = None
