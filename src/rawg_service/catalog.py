"""Typed RAWG catalog calls built on the request executor."""

from __future__ import annotations

from typing import Any

from rawg_service.errors import Result
from rawg_service.executor import RequestExecutor
from rawg_service.models import GameDetail, GamePage, GenrePage
from rawg_service.settings import Settings

DEFAULT_PAGE_SIZE = 20


def _check_paging(page: int, page_size: int) -> None:
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


class GamesCatalog:
    """RAWG games and genres lookups."""

    def __init__(self, executor: RequestExecutor, *, api_key: str = "") -> None:
        self._executor = executor
        self._api_key = api_key.strip()

    @classmethod
    def from_settings(cls, settings: Settings, **executor_kwargs: Any) -> GamesCatalog:
        executor = RequestExecutor.from_settings(settings, **executor_kwargs)
        return cls(executor, api_key=settings.api_key)

    def _params(self, params: dict[str, Any]) -> dict[str, Any]:
        if self._api_key and "key" not in params:
            params["key"] = self._api_key
        return params

    async def list_games(
        self,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        search: str | None = None,
        ordering: str | None = None,
        genres: list[str] | None = None,
    ) -> Result[GamePage]:
        """List games, optionally filtered by search text and genre slugs."""
        _check_paging(page, page_size)
        params: dict[str, Any] = {"page": page, "page_size": page_size}
        if search:
            params["search"] = search
        if ordering:
            params["ordering"] = ordering
        if genres:
            params["genres"] = ",".join(genres)
        return await self._executor.execute("/games", GamePage, parameters=self._params(params))

    async def get_game(self, game_id: int | str) -> Result[GameDetail]:
        """Fetch one game by numeric id or slug."""
        return await self._executor.execute(
            f"/games/{game_id}",
            GameDetail,
            parameters=self._params({}),
        )

    async def list_genres(
        self,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Result[GenrePage]:
        _check_paging(page, page_size)
        params: dict[str, Any] = {"page": page, "page_size": page_size}
        return await self._executor.execute("/genres", GenrePage, parameters=self._params(params))
