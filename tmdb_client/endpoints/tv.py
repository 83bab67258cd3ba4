"""TV series endpoints.

https://developer.themoviedb.org/reference/tv-series-details
"""

from __future__ import annotations

from typing import Any, Mapping

from ..schemas.tv import (
    TV,
    TvAccountState,
    TvAlternativeTitles,
    TvChanges,
    TvCredits,
    TvExternalIds,
    TvImages,
    TvKeywords,
    TvPagedResults,
    TvRecommendations,
    TvTranslations,
    TvVideos,
)

Options = Mapping[str, Any] | None

LIST_OPTIONS = frozenset({"page", "language"})
DETAIL_OPTIONS = frozenset({"language", "append_to_response"})


class TvMixin:
    """Accessors for ``/tv`` resources."""

    def get_tv_info(self, tv_id: int, options: Options = None) -> TV:
        """Get the primary information about a TV series."""
        return self._get(f"/tv/{tv_id}", TV, options, DETAIL_OPTIONS)

    def get_tv_account_states(self, tv_id: int, session_id: str) -> TvAccountState:
        """Get whether the series is rated, favourited or on the session's watchlist."""
        return self._get(
            f"/tv/{tv_id}/account_states", TvAccountState, session_id=session_id
        )

    def get_tv_airing_today(self, options: Options = None) -> TvPagedResults:
        """Get the series airing today.

        Recognized options: ``page``, ``language``, ``timezone``.
        """
        return self._get(
            "/tv/airing_today", TvPagedResults, options, LIST_OPTIONS | {"timezone"}
        )

    def get_tv_alternative_titles(self, tv_id: int) -> TvAlternativeTitles:
        return self._get(f"/tv/{tv_id}/alternative_titles", TvAlternativeTitles)

    def get_tv_changes(self, tv_id: int, options: Options = None) -> TvChanges:
        """Get the changes for a series.

        Recognized options: ``start_date``, ``end_date`` (YYYY-MM-DD).
        """
        return self._get(
            f"/tv/{tv_id}/changes", TvChanges, options, {"start_date", "end_date"}
        )

    def get_tv_credits(self, tv_id: int, options: Options = None) -> TvCredits:
        return self._get(f"/tv/{tv_id}/credits", TvCredits, options, DETAIL_OPTIONS)

    def get_tv_external_ids(self, tv_id: int, options: Options = None) -> TvExternalIds:
        return self._get(
            f"/tv/{tv_id}/external_ids", TvExternalIds, options, {"language"}
        )

    def get_tv_images(self, tv_id: int, options: Options = None) -> TvImages:
        """Get the backdrops, posters and logos of a series.

        Recognized options: ``language``, ``include_image_language``.
        """
        return self._get(
            f"/tv/{tv_id}/images",
            TvImages,
            options,
            {"language", "include_image_language"},
        )

    def get_tv_keywords(self, tv_id: int, options: Options = None) -> TvKeywords:
        return self._get(
            f"/tv/{tv_id}/keywords", TvKeywords, options, {"append_to_response"}
        )

    def get_tv_recommendations(
        self, tv_id: int, options: Options = None
    ) -> TvRecommendations:
        return self._get(
            f"/tv/{tv_id}/recommendations", TvRecommendations, options, LIST_OPTIONS
        )

    def get_tv_latest(self) -> TV:
        """Get the most recently created series."""
        return self._get("/tv/latest", TV)

    def get_tv_on_the_air(self, options: Options = None) -> TvPagedResults:
        """Get the series with an episode airing in the next seven days."""
        return self._get("/tv/on_the_air", TvPagedResults, options, LIST_OPTIONS)

    def get_tv_popular(self, options: Options = None) -> TvPagedResults:
        return self._get("/tv/popular", TvPagedResults, options, LIST_OPTIONS)

    def get_tv_similar(self, tv_id: int, options: Options = None) -> TvPagedResults:
        return self._get(
            f"/tv/{tv_id}/similar",
            TvPagedResults,
            options,
            LIST_OPTIONS | {"append_to_response"},
        )

    def get_tv_top_rated(self, options: Options = None) -> TvPagedResults:
        return self._get("/tv/top_rated", TvPagedResults, options, LIST_OPTIONS)

    def get_tv_translations(self, tv_id: int) -> TvTranslations:
        return self._get(f"/tv/{tv_id}/translations", TvTranslations)

    def get_tv_videos(self, tv_id: int, options: Options = None) -> TvVideos:
        return self._get(f"/tv/{tv_id}/videos", TvVideos, options, {"language"})
