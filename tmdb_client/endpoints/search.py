"""Search endpoints."""

from __future__ import annotations

from ..schemas.movie import MoviePagedResults
from ..schemas.tv import TvPagedResults
from .tv import LIST_OPTIONS, Options


class SearchMixin:
    """Accessors for ``/search`` resources. The query is always sent."""

    def search_tv(self, query: str, options: Options = None) -> TvPagedResults:
        """Search series by original, translated and alternative names.

        Recognized options: ``page``, ``language``, ``include_adult``,
        ``first_air_date_year``.
        """
        return self._get(
            "/search/tv",
            TvPagedResults,
            options,
            LIST_OPTIONS | {"include_adult", "first_air_date_year"},
            query=query,
        )

    def search_movie(self, query: str, options: Options = None) -> MoviePagedResults:
        """Search movies by original, translated and alternative titles.

        Recognized options: ``page``, ``language``, ``include_adult``,
        ``region``, ``year``, ``primary_release_year``.
        """
        return self._get(
            "/search/movie",
            MoviePagedResults,
            options,
            LIST_OPTIONS | {"include_adult", "region", "year", "primary_release_year"},
            query=query,
        )
