"""TV series resources."""

from __future__ import annotations

from .common import (
    AlternativeTitle,
    CastMember,
    Changes,
    Company,
    CrewMember,
    Genre,
    Images,
    Keyword,
    TMDbModel,
    Translations,
    Videos,
)

TvChanges = Changes
TvImages = Images
TvTranslations = Translations
TvVideos = Videos


class Creator(TMDbModel):
    id: int | None = None
    name: str | None = None
    credit_id: str | None = None
    gender: int | None = None
    profile_path: str | None = None


class Episode(TMDbModel):
    id: int | None = None
    name: str | None = None
    overview: str | None = None
    air_date: str | None = None
    episode_number: int | None = None
    season_number: int | None = None
    production_code: str | None = None
    still_path: str | None = None
    vote_average: float | None = None
    vote_count: int | None = None


class Season(TMDbModel):
    id: int | None = None
    name: str | None = None
    overview: str | None = None
    air_date: str | None = None
    episode_count: int | None = None
    poster_path: str | None = None
    season_number: int | None = None


class TvAlternativeTitles(TMDbModel):
    id: int | None = None
    results: list[AlternativeTitle] = []


class TvCredits(TMDbModel):
    id: int | None = None
    cast: list[CastMember] = []
    crew: list[CrewMember] = []


class TvExternalIds(TMDbModel):
    id: int | None = None
    imdb_id: str | None = None
    freebase_id: str | None = None
    freebase_mid: str | None = None
    tvdb_id: int | None = None
    tvrage_id: int | None = None
    facebook_id: str | None = None
    instagram_id: str | None = None
    twitter_id: str | None = None


class TvKeywords(TMDbModel):
    id: int | None = None
    results: list[Keyword] = []


class TvShort(TMDbModel):
    """Series summary as it appears in lists and search results."""

    id: int | None = None
    name: str | None = None
    original_name: str | None = None
    original_language: str | None = None
    overview: str | None = None
    adult: bool | None = None
    backdrop_path: str | None = None
    poster_path: str | None = None
    first_air_date: str | None = None
    genre_ids: list[int] = []
    origin_country: list[str] = []
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None


class TvPagedResults(TMDbModel):
    id: int | None = None
    page: int | None = None
    results: list[TvShort] = []
    total_pages: int | None = None
    total_results: int | None = None


class NetworkLogo(TMDbModel):
    path: str | None = None
    aspect_ratio: float | None = None


class RecommendedNetwork(TMDbModel):
    id: int | None = None
    name: str | None = None
    origin_country: str | None = None
    logo: NetworkLogo | None = None


class TvRecommendation(TvShort):
    networks: list[RecommendedNetwork] = []


class TvRecommendations(TMDbModel):
    page: int | None = None
    results: list[TvRecommendation] = []
    total_pages: int | None = None
    total_results: int | None = None


class RatedValue(TMDbModel):
    value: float | None = None


class TvAccountState(TMDbModel):
    id: int | None = None
    favorite: bool = False
    watchlist: bool = False
    # False when unrated, {"value": <rating>} otherwise
    rated: RatedValue | bool = False


class TV(TMDbModel):
    """Primary information about a TV series.

    The trailing optional fields are populated when the matching resource is
    requested through ``append_to_response``.
    """

    id: int | None = None
    name: str | None = None
    original_name: str | None = None
    original_language: str | None = None
    overview: str | None = None
    homepage: str | None = None
    status: str | None = None
    type: str | None = None
    tagline: str | None = None
    backdrop_path: str | None = None
    poster_path: str | None = None
    first_air_date: str | None = None
    last_air_date: str | None = None
    in_production: bool | None = None
    number_of_episodes: int | None = None
    number_of_seasons: int | None = None
    episode_run_time: list[int] = []
    languages: list[str] = []
    origin_country: list[str] = []
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    created_by: list[Creator] = []
    genres: list[Genre] = []
    networks: list[Company] = []
    production_companies: list[Company] = []
    seasons: list[Season] = []
    last_episode_to_air: Episode | None = None
    next_episode_to_air: Episode | None = None

    alternative_titles: TvAlternativeTitles | None = None
    changes: TvChanges | None = None
    credits: TvCredits | None = None
    external_ids: TvExternalIds | None = None
    images: TvImages | None = None
    keywords: TvKeywords | None = None
    recommendations: TvRecommendations | None = None
    similar: TvPagedResults | None = None
    translations: TvTranslations | None = None
    videos: TvVideos | None = None
