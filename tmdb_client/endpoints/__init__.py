"""Endpoint accessors, mixed into :class:`tmdb_client.TMDb`."""

from .movie import MovieMixin
from .search import SearchMixin
from .tv import TvMixin

__all__ = ["MovieMixin", "SearchMixin", "TvMixin"]
