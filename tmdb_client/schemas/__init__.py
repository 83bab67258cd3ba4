"""Typed result shapes for API resources."""

from .common import (
    AlternativeTitle,
    CastMember,
    Change,
    ChangeItem,
    Changes,
    Company,
    CrewMember,
    Genre,
    Image,
    Images,
    Keyword,
    TMDbModel,
    Translation,
    TranslationData,
    Translations,
    Video,
    Videos,
)
from .movie import (
    Movie,
    MovieAlternativeTitles,
    MovieChanges,
    MovieCredits,
    MovieDatedResults,
    MovieExternalIds,
    MovieImages,
    MovieKeywords,
    MoviePagedResults,
    MovieShort,
    MovieTranslations,
    MovieVideos,
)
from .tv import (
    TV,
    Episode,
    Season,
    TvAccountState,
    TvAlternativeTitles,
    TvChanges,
    TvCredits,
    TvExternalIds,
    TvImages,
    TvKeywords,
    TvPagedResults,
    TvRecommendations,
    TvShort,
    TvTranslations,
    TvVideos,
)

__all__ = [
    # Shared
    "TMDbModel",
    "AlternativeTitle",
    "CastMember",
    "Change",
    "ChangeItem",
    "Changes",
    "Company",
    "CrewMember",
    "Genre",
    "Image",
    "Images",
    "Keyword",
    "Translation",
    "TranslationData",
    "Translations",
    "Video",
    "Videos",
    # TV
    "TV",
    "Episode",
    "Season",
    "TvAccountState",
    "TvAlternativeTitles",
    "TvChanges",
    "TvCredits",
    "TvExternalIds",
    "TvImages",
    "TvKeywords",
    "TvPagedResults",
    "TvRecommendations",
    "TvShort",
    "TvTranslations",
    "TvVideos",
    # Movies
    "Movie",
    "MovieAlternativeTitles",
    "MovieChanges",
    "MovieCredits",
    "MovieDatedResults",
    "MovieExternalIds",
    "MovieImages",
    "MovieKeywords",
    "MoviePagedResults",
    "MovieShort",
    "MovieTranslations",
    "MovieVideos",
]
