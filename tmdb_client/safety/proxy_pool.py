"""Proxy records and the round-robin proxy pool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable
from urllib.parse import quote, urlsplit

from .._debug import mask_proxy_password
from ..models import ProxyConfigurationError
from .round_robin import RoundRobin

if TYPE_CHECKING:
    from ..config import ClientConfig

logger = logging.getLogger(__name__)

# Host value that marks a pool slot as "no proxy"
DIRECT_HOST = "localhost"

# Proxy schemes every backend can route through (socks5 via httpx[socks])
VALID_PROXY_SCHEMES = {"http", "https", "socks5"}


def validate_proxy_url(url: str) -> None:
    """Validate a proxy URL.

    Args:
        url: Proxy URL to validate.

    Raises:
        ProxyConfigurationError: If the URL is invalid.
    """
    try:
        parsed = urlsplit(url)
        port = parsed.port
    except ValueError as e:
        raise ProxyConfigurationError(url, f"Failed to parse URL: {e}") from e

    scheme = parsed.scheme.lower()
    if scheme not in VALID_PROXY_SCHEMES:
        raise ProxyConfigurationError(
            url,
            f"Invalid scheme '{scheme}'. Must be one of: {', '.join(sorted(VALID_PROXY_SCHEMES))}"
        )

    if not parsed.hostname or any(ch.isspace() for ch in parsed.hostname):
        raise ProxyConfigurationError(url, "Missing or malformed hostname")

    if port is None:
        raise ProxyConfigurationError(url, "Missing port")


@dataclass(frozen=True)
class Proxy:
    """A single proxy endpoint.

    Attributes:
        host: Proxy host. ``"localhost"`` marks the slot as a direct connection.
        port: Proxy port.
        login: Auth username (used only when ``auth`` is set).
        password: Auth password (used only when ``auth`` is set).
        auth: Whether to embed credentials in the proxy URL.
        scheme: Proxy URL scheme.
    """

    host: str
    port: str | int
    login: str = ""
    password: str = ""
    auth: bool = False
    scheme: str = "https"

    @property
    def is_direct(self) -> bool:
        """True when this slot should bypass proxying."""
        return self.host == DIRECT_HOST

    @property
    def url(self) -> str:
        """Proxy URL, with credentials as user-info when auth is enabled."""
        if self.auth:
            login = quote(self.login, safe="")
            password = quote(self.password, safe="")
            return f"{self.scheme}://{login}:{password}@{self.host}:{self.port}"
        return f"{self.scheme}://{self.host}:{self.port}"


class ProxyPool:
    """Immutable set of proxies rotated in round-robin order.

    The pool copies the proxies it is given and validates every proxy URL up
    front, so a bad entry fails at construction instead of mid-traffic.
    """

    def __init__(self, proxies: Iterable[Proxy]):
        """Initialize proxy pool.

        Args:
            proxies: Proxy records to rotate across.

        Raises:
            ValueError: If no proxies are given.
            ProxyConfigurationError: If a proxy URL is malformed.
        """
        self._proxies: tuple[Proxy, ...] = tuple(proxies)
        if not self._proxies:
            raise ValueError("ProxyPool requires at least one proxy")

        for proxy in self._proxies:
            if not proxy.is_direct:
                validate_proxy_url(proxy.url)  # Fail fast on invalid URLs

        self._round_robin = RoundRobin(len(self._proxies))

    @classmethod
    def from_config(cls, config: ClientConfig) -> ProxyPool | None:
        """Build the pool for a client configuration.

        Returns None (direct connections) unless proxying is enabled and more
        than one proxy is configured.
        """
        if not config.use_proxy:
            return None

        if len(config.proxies) < 2:
            logger.warning(
                "Proxying enabled with %d proxy configured; at least 2 are "
                "required for rotation, falling back to direct connections",
                len(config.proxies),
            )
            return None

        pool = cls(config.proxies)
        logger.debug(
            "Proxy pool ready: %s",
            ", ".join(
                "direct" if p.is_direct else mask_proxy_password(p.url)
                for p in pool.proxies
            ),
        )
        return pool

    def next_proxy(self) -> Proxy:
        """Return the next proxy in rotation."""
        return self._proxies[self._round_robin.next()]

    @property
    def proxies(self) -> tuple[Proxy, ...]:
        """Proxies in rotation order."""
        return self._proxies

    def __len__(self) -> int:
        """Return total number of proxies."""
        return len(self._proxies)
