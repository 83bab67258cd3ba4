"""Movie endpoints.

https://developer.themoviedb.org/reference/movie-details
"""

from __future__ import annotations

from ..schemas.movie import (
    Movie,
    MovieAlternativeTitles,
    MovieChanges,
    MovieCredits,
    MovieDatedResults,
    MovieExternalIds,
    MovieImages,
    MovieKeywords,
    MoviePagedResults,
    MovieTranslations,
    MovieVideos,
)
from .tv import DETAIL_OPTIONS, LIST_OPTIONS, Options

REGION_LIST_OPTIONS = LIST_OPTIONS | {"region"}


class MovieMixin:
    """Accessors for ``/movie`` resources."""

    def get_movie_info(self, movie_id: int, options: Options = None) -> Movie:
        """Get the primary information about a movie."""
        return self._get(f"/movie/{movie_id}", Movie, options, DETAIL_OPTIONS)

    def get_movie_alternative_titles(
        self, movie_id: int, options: Options = None
    ) -> MovieAlternativeTitles:
        """Get the alternative titles of a movie.

        Recognized options: ``country`` (ISO 3166-1 code).
        """
        return self._get(
            f"/movie/{movie_id}/alternative_titles",
            MovieAlternativeTitles,
            options,
            {"country"},
        )

    def get_movie_changes(self, movie_id: int, options: Options = None) -> MovieChanges:
        return self._get(
            f"/movie/{movie_id}/changes",
            MovieChanges,
            options,
            {"start_date", "end_date", "page"},
        )

    def get_movie_credits(self, movie_id: int, options: Options = None) -> MovieCredits:
        return self._get(f"/movie/{movie_id}/credits", MovieCredits, options, {"language"})

    def get_movie_external_ids(self, movie_id: int) -> MovieExternalIds:
        return self._get(f"/movie/{movie_id}/external_ids", MovieExternalIds)

    def get_movie_images(self, movie_id: int, options: Options = None) -> MovieImages:
        return self._get(
            f"/movie/{movie_id}/images",
            MovieImages,
            options,
            {"language", "include_image_language"},
        )

    def get_movie_keywords(self, movie_id: int) -> MovieKeywords:
        return self._get(f"/movie/{movie_id}/keywords", MovieKeywords)

    def get_movie_recommendations(
        self, movie_id: int, options: Options = None
    ) -> MoviePagedResults:
        return self._get(
            f"/movie/{movie_id}/recommendations", MoviePagedResults, options, LIST_OPTIONS
        )

    def get_movie_similar(self, movie_id: int, options: Options = None) -> MoviePagedResults:
        return self._get(
            f"/movie/{movie_id}/similar", MoviePagedResults, options, LIST_OPTIONS
        )

    def get_movie_translations(self, movie_id: int) -> MovieTranslations:
        return self._get(f"/movie/{movie_id}/translations", MovieTranslations)

    def get_movie_videos(self, movie_id: int, options: Options = None) -> MovieVideos:
        return self._get(f"/movie/{movie_id}/videos", MovieVideos, options, {"language"})

    def get_movie_latest(self, options: Options = None) -> Movie:
        """Get the most recently created movie."""
        return self._get("/movie/latest", Movie, options, {"language"})

    def get_movie_now_playing(self, options: Options = None) -> MovieDatedResults:
        """Get the movies currently in theatres.

        Recognized options: ``page``, ``language``, ``region``.
        """
        return self._get(
            "/movie/now_playing", MovieDatedResults, options, REGION_LIST_OPTIONS
        )

    def get_movie_popular(self, options: Options = None) -> MoviePagedResults:
        return self._get(
            "/movie/popular", MoviePagedResults, options, REGION_LIST_OPTIONS
        )

    def get_movie_top_rated(self, options: Options = None) -> MoviePagedResults:
        return self._get(
            "/movie/top_rated", MoviePagedResults, options, REGION_LIST_OPTIONS
        )

    def get_movie_upcoming(self, options: Options = None) -> MovieDatedResults:
        return self._get(
            "/movie/upcoming", MovieDatedResults, options, REGION_LIST_OPTIONS
        )
