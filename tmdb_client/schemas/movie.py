"""Movie resources."""

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

MovieChanges = Changes
MovieImages = Images
MovieTranslations = Translations
MovieVideos = Videos


class Collection(TMDbModel):
    id: int | None = None
    name: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None


class Country(TMDbModel):
    iso_3166_1: str | None = None
    name: str | None = None


class SpokenLanguage(TMDbModel):
    iso_639_1: str | None = None
    name: str | None = None
    english_name: str | None = None


class MovieAlternativeTitles(TMDbModel):
    id: int | None = None
    titles: list[AlternativeTitle] = []


class MovieCredits(TMDbModel):
    id: int | None = None
    cast: list[CastMember] = []
    crew: list[CrewMember] = []


class MovieExternalIds(TMDbModel):
    id: int | None = None
    imdb_id: str | None = None
    wikidata_id: str | None = None
    facebook_id: str | None = None
    instagram_id: str | None = None
    twitter_id: str | None = None


class MovieKeywords(TMDbModel):
    id: int | None = None
    keywords: list[Keyword] = []


class MovieShort(TMDbModel):
    """Movie summary as it appears in lists and search results."""

    id: int | None = None
    title: str | None = None
    original_title: str | None = None
    original_language: str | None = None
    overview: str | None = None
    adult: bool | None = None
    video: bool | None = None
    backdrop_path: str | None = None
    poster_path: str | None = None
    release_date: str | None = None
    genre_ids: list[int] = []
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None


class MoviePagedResults(TMDbModel):
    id: int | None = None
    page: int | None = None
    results: list[MovieShort] = []
    total_pages: int | None = None
    total_results: int | None = None


class DateRange(TMDbModel):
    maximum: str | None = None
    minimum: str | None = None


class MovieDatedResults(MoviePagedResults):
    """Paged results for now playing and upcoming lists."""

    dates: DateRange | None = None


class Movie(TMDbModel):
    """Primary information about a movie.

    The trailing optional fields are populated when the matching resource is
    requested through ``append_to_response``.
    """

    id: int | None = None
    imdb_id: str | None = None
    title: str | None = None
    original_title: str | None = None
    original_language: str | None = None
    overview: str | None = None
    tagline: str | None = None
    homepage: str | None = None
    status: str | None = None
    adult: bool | None = None
    video: bool | None = None
    backdrop_path: str | None = None
    poster_path: str | None = None
    release_date: str | None = None
    runtime: int | None = None
    budget: int | None = None
    revenue: int | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    belongs_to_collection: Collection | None = None
    genres: list[Genre] = []
    production_companies: list[Company] = []
    production_countries: list[Country] = []
    spoken_languages: list[SpokenLanguage] = []

    alternative_titles: MovieAlternativeTitles | None = None
    changes: MovieChanges | None = None
    credits: MovieCredits | None = None
    external_ids: MovieExternalIds | None = None
    images: MovieImages | None = None
    keywords: MovieKeywords | None = None
    recommendations: MoviePagedResults | None = None
    similar: MoviePagedResults | None = None
    translations: MovieTranslations | None = None
    videos: MovieVideos | None = None
