"""TMDb client with the shared request/decode pipeline."""

from __future__ import annotations

import logging
from typing import Any, Collection, Mapping, Sequence, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from ._backends import create_backend
from ._debug import mask_api_key, mask_proxy_password
from .config import ClientConfig
from .endpoints import MovieMixin, SearchMixin, TvMixin
from .models import APIError, APIStatus, DecodeError, Response
from .options import build_options
from .safety import Proxy, ProxyPool

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(response: Response, model: type[ModelT]) -> ModelT:
    """Decode a backend response into ``model`` or raise the matching error.

    Args:
        response: Response with the full body already read.
        model: Expected result shape for a 2xx response.

    Returns:
        Populated ``model`` instance.

    Raises:
        DecodeError: If the body does not fit ``model`` (2xx) or the error
            envelope (non-2xx).
        APIError: If the API reported an error through its envelope.
    """
    code = response.status_code

    if response.ok:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"decoding payload (status code {code}): {e}",
                status_code=code,
                original_error=e,
            ) from e

    try:
        status = APIStatus.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"decoding error payload (status code {code}) yield response "
            f"'{response.text}': {e}",
            status_code=code,
            body=response.text,
            original_error=e,
        ) from e

    raise APIError(status.status_code, status.status_message, http_status=code)


class TMDb(TvMixin, MovieMixin, SearchMixin):
    """Client for the TMDb v3 API.

    Every endpoint method issues one blocking GET and returns a typed result
    or raises a :class:`~tmdb_client.models.TMDbError`. A client is safe to
    share between threads; proxy rotation is serialized internally.

    Examples:
        # Direct connection
        tmdb = TMDb("my-api-key")
        show = tmdb.get_tv_info(1399, {"language": "en-US"})

        # Rotating through proxies
        tmdb = TMDb(
            "my-api-key",
            use_proxy=True,
            proxies=[
                Proxy(host="10.0.0.1", port=3128),
                Proxy(host="10.0.0.2", port=3128, login="u", password="p", auth=True),
            ],
        )

        # From a prepared configuration
        with TMDb(config=ClientConfig(api_key="my-api-key", timeout=10.0)) as tmdb:
            popular = tmdb.get_movie_popular({"page": "2"})
    """

    def __init__(
        self,
        api_key: str | None = None,
        use_proxy: bool = False,
        proxies: Sequence[Proxy] | None = None,
        *,
        config: ClientConfig | None = None,
        **kwargs: Any,
    ):
        """Initialize TMDb client.

        Args:
            api_key: TMDb API key. Ignored when ``config`` is given.
            use_proxy: Route requests through ``proxies``.
            proxies: Proxy records to rotate across.
            config: Complete configuration; overrides the other arguments.
            **kwargs: Additional :class:`ClientConfig` fields.

        Raises:
            ValueError: If the configuration is invalid.
            ProxyConfigurationError: If a proxy URL is malformed.
        """
        if config is None:
            if api_key is None:
                raise ValueError("api_key or config is required")
            config = ClientConfig(
                api_key=api_key,
                use_proxy=use_proxy,
                proxies=tuple(proxies or ()),
                **kwargs,
            )

        self._config = config
        self._proxy_pool = ProxyPool.from_config(config)
        self._backend = create_backend(config)

    @property
    def config(self) -> ClientConfig:
        """Client configuration."""
        return self._config

    @property
    def proxy_pool(self) -> ProxyPool | None:
        """Active proxy pool, or None when requests go direct."""
        return self._proxy_pool

    def url(
        self,
        path: str,
        options: Mapping[str, Any] | None = None,
        available: Collection[str] = (),
        **params: Any,
    ) -> str:
        """Build a full request URL.

        Args:
            path: Resource path, e.g. ``/tv/1399``.
            options: Caller options, filtered against ``available``.
            available: Option names the endpoint accepts.
            **params: Required query parameters, always included.

        Returns:
            URL with ``api_key``, required parameters and options.
        """
        query = f"api_key={quote(self._config.api_key, safe='')}"
        for key, value in params.items():
            query += f"&{key}={quote(str(value), safe='')}"
        return f"{self._config.base_url}{path}?{query}{build_options(options, available)}"

    def _select_proxy(self) -> str | None:
        """Pick the proxy URL for the next request (None means direct)."""
        if self._proxy_pool is None:
            return None
        proxy = self._proxy_pool.next_proxy()
        if proxy.is_direct:
            return None
        return proxy.url

    def fetch(self, url: str, model: type[ModelT]) -> ModelT:
        """GET ``url`` and decode the response into ``model``.

        Args:
            url: Full request URL.
            model: Expected result shape.

        Returns:
            Populated ``model`` instance.

        Raises:
            TransportError: If the request failed or the body could not be read.
            DecodeError: If the body could not be decoded.
            APIError: If the API returned an error envelope.
        """
        proxy = self._select_proxy()
        logger.debug(
            "GET %s via %s",
            mask_api_key(url),
            mask_proxy_password(proxy) if proxy else "direct",
        )
        response = self._backend.get(url, proxy=proxy)
        logger.debug("HTTP %d from %s", response.status_code, mask_api_key(response.url))
        return decode_response(response, model)

    def _get(
        self,
        path: str,
        model: type[ModelT],
        options: Mapping[str, Any] | None = None,
        available: Collection[str] = (),
        **params: Any,
    ) -> ModelT:
        return self.fetch(self.url(path, options, available, **params), model)

    def close(self) -> None:
        """Release pooled connections."""
        self._backend.close()

    def __enter__(self) -> TMDb:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def init(config: ClientConfig) -> TMDb:
    """Create a client from a configuration.

    Proxying is enabled only when ``config.use_proxy`` is set and more than
    one proxy is configured.
    """
    return TMDb(config=config)
