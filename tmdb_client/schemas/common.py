"""Shapes shared by TV and movie resources."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TMDbModel(BaseModel):
    """Base for all decoded resources. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class Genre(TMDbModel):
    id: int | None = None
    name: str | None = None


class Company(TMDbModel):
    """Production company or network."""

    id: int | None = None
    name: str | None = None
    logo_path: str | None = None
    origin_country: str | None = None


class Keyword(TMDbModel):
    id: int | None = None
    name: str | None = None


class AlternativeTitle(TMDbModel):
    iso_3166_1: str | None = None
    title: str | None = None
    type: str | None = None


class ChangeItem(TMDbModel):
    id: str | None = None
    action: str | None = None
    time: str | None = None


class Change(TMDbModel):
    key: str | None = None
    items: list[ChangeItem] = []


class Changes(TMDbModel):
    changes: list[Change] = []


class CastMember(TMDbModel):
    id: int | None = None
    name: str | None = None
    character: str | None = None
    credit_id: str | None = None
    gender: int | None = None
    order: int | None = None
    profile_path: str | None = None


class CrewMember(TMDbModel):
    id: int | None = None
    name: str | None = None
    credit_id: str | None = None
    department: str | None = None
    job: str | None = None
    gender: int | None = None
    profile_path: str | None = None


class Image(TMDbModel):
    file_path: str | None = None
    width: int | None = None
    height: int | None = None
    iso_639_1: str | None = None
    aspect_ratio: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None


class Images(TMDbModel):
    id: int | None = None
    backdrops: list[Image] = []
    posters: list[Image] = []
    logos: list[Image] = []


class Video(TMDbModel):
    id: str | None = None
    iso_639_1: str | None = None
    iso_3166_1: str | None = None
    key: str | None = None
    name: str | None = None
    site: str | None = None
    size: int | None = None
    type: str | None = None


class Videos(TMDbModel):
    id: int | None = None
    results: list[Video] = []


class TranslationData(TMDbModel):
    name: str | None = None
    title: str | None = None
    overview: str | None = None
    homepage: str | None = None
    tagline: str | None = None


class Translation(TMDbModel):
    iso_3166_1: str | None = None
    iso_639_1: str | None = None
    name: str | None = None
    english_name: str | None = None
    data: TranslationData | None = None


class Translations(TMDbModel):
    id: int | None = None
    translations: list[Translation] = []
