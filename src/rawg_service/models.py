"""Response models for RAWG resources."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

ItemT = TypeVar("ItemT")


class RawgModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Genre(RawgModel):
    id: int
    name: str
    slug: str
    games_count: int = 0
    image_background: str | None = None


class Platform(RawgModel):
    id: int
    name: str
    slug: str


class PlatformEntry(RawgModel):
    """One element of a game's `platforms` list."""

    platform: Platform
    released_at: str | None = None


class Game(RawgModel):
    id: int
    slug: str
    name: str
    released: str | None = None
    background_image: str | None = None
    rating: float = 0.0
    rating_top: int = 0
    ratings_count: int = 0
    metacritic: int | None = None
    playtime: int = 0
    platforms: list[PlatformEntry] | None = None
    genres: list[Genre] = Field(default_factory=list)


class GameDetail(Game):
    description_raw: str = ""
    website: str = ""


class Page(RawgModel, Generic[ItemT]):
    """Paginated list envelope returned by RAWG collection endpoints."""

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[ItemT] = Field(default_factory=list)


GamePage = Page[Game]
GenrePage = Page[Genre]
