"""Client library for the TMDb v3 movie and TV metadata API.

This package provides typed access to TMDb endpoints with:

- One GET per call, decoded into pydantic models
- Optional round-robin rotation across a pool of proxies
- httpx transport by default, curl_cffi impersonation as an option
- Uniform errors for transport, decoding and API-reported failures

Basic usage:

    from tmdb_client import TMDb, Proxy, to_json

    tmdb = TMDb("my-api-key")
    show = tmdb.get_tv_info(1399, {"language": "en-US", "append_to_response": "credits"})
    print(show.name, len(show.credits.cast))

    # Rotate requests across proxies. A "localhost" slot goes direct.
    tmdb = TMDb(
        "my-api-key",
        use_proxy=True,
        proxies=[
            Proxy(host="proxy1.example.com", port=8080),
            Proxy(host="localhost", port=0),
        ],
    )

    # Pretty-print any result
    print(to_json(tmdb.get_movie_popular()))
"""

from .client import TMDb, decode_response, init
from .config import BASE_URL, ClientConfig
from .models import (
    APIError,
    APIStatus,
    BodyReadError,
    DecodeError,
    ProxyConfigurationError,
    Response,
    TMDbError,
    TransportError,
)
from .options import build_options
from .safety import Proxy, ProxyPool, RoundRobin
from .utils import to_json

__version__ = "0.1.0"

__all__ = [
    # Main client
    "TMDb",
    "init",
    "decode_response",
    # Configuration
    "BASE_URL",
    "ClientConfig",
    # Models
    "Response",
    "APIStatus",
    # Exceptions
    "TMDbError",
    "TransportError",
    "BodyReadError",
    "DecodeError",
    "APIError",
    "ProxyConfigurationError",
    # Proxy rotation
    "Proxy",
    "ProxyPool",
    "RoundRobin",
    # Helpers
    "build_options",
    "to_json",
    # Version
    "__version__",
]
