"""Thread-safe proxy rotation primitives."""

from .round_robin import RoundRobin
from .proxy_pool import Proxy, ProxyPool, validate_proxy_url

__all__ = [
    "RoundRobin",
    "Proxy",
    "ProxyPool",
    "validate_proxy_url",
]
