from __future__ import annotations

import asyncio

import httpx
import pytest

from rawg_service.catalog import GamesCatalog
from rawg_service.errors import ErrorKind
from rawg_service.executor import RequestExecutor
from rawg_service.models import Game, GameDetail
from rawg_service.settings import Settings

GAMES_PAGE = {
    "count": 2,
    "next": "https://api.rawg.io/api/games?page=2",
    "previous": None,
    "results": [
        {
            "id": 3498,
            "slug": "grand-theft-auto-v",
            "name": "Grand Theft Auto V",
            "released": "2013-09-17",
            "rating": 4.47,
            "metacritic": 92,
            "platforms": [{"platform": {"id": 4, "name": "PC", "slug": "pc"}}],
            "genres": [{"id": 4, "name": "Action", "slug": "action"}],
            "tags": [{"id": 31, "name": "Singleplayer"}],
        },
        {"id": 4200, "slug": "portal-2", "name": "Portal 2"},
    ],
}


def _catalog(
    handler,
    *,
    api_key: str = "",
) -> GamesCatalog:
    executor = RequestExecutor(transport=httpx.MockTransport(handler))
    return GamesCatalog(executor, api_key=api_key)


def test_list_games_decodes_page_and_sends_paging() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=GAMES_PAGE)

    result = asyncio.run(_catalog(handler).list_games(page=2, page_size=10))

    page = result.unwrap()
    assert page.count == 2
    assert [game.slug for game in page.results] == ["grand-theft-auto-v", "portal-2"]
    assert isinstance(page.results[0], Game)
    assert page.results[0].platforms is not None
    assert page.results[0].platforms[0].platform.name == "PC"
    assert page.results[0].genres[0].slug == "action"
    assert page.results[1].metacritic is None
    assert seen[0].url.path == "/api/games"
    assert seen[0].url.query == b"page=2&page_size=10"


def test_list_games_appends_filters_and_api_key() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=GAMES_PAGE)

    asyncio.run(
        _catalog(handler, api_key="k-123").list_games(
            search="portal",
            ordering="-rating",
            genres=["action", "puzzle"],
        )
    )

    params = seen[0].url.params
    assert list(params.keys()) == ["page", "page_size", "search", "ordering", "genres", "key"]
    assert params["genres"] == "action,puzzle"
    assert params["key"] == "k-123"


def test_get_game_decodes_detail() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/games/4200"
        return httpx.Response(
            200,
            json={
                "id": 4200,
                "slug": "portal-2",
                "name": "Portal 2",
                "description_raw": "Sequel to Portal.",
                "website": "http://www.thinkwithportals.com/",
            },
        )

    result = asyncio.run(_catalog(handler).get_game(4200))

    detail = result.unwrap()
    assert isinstance(detail, GameDetail)
    assert detail.description_raw == "Sequel to Portal."
    assert detail.genres == []


def test_get_game_without_key_sends_no_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": 1, "slug": "a", "name": "A"})

    asyncio.run(_catalog(handler).get_game("a"))

    assert seen[0].url.query == b""


def test_list_genres_reports_decoder_error_for_wrong_shape() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"results": [{"id": "x"}]})

    result = asyncio.run(_catalog(handler).list_genres())

    assert result.error is ErrorKind.DECODER_ERROR


@pytest.mark.parametrize(("page", "page_size"), [(0, 20), (1, 0), (-1, 10)])
def test_paging_is_validated_before_dispatch(page: int, page_size: int) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=GAMES_PAGE)

    with pytest.raises(ValueError):
        asyncio.run(_catalog(handler).list_games(page=page, page_size=page_size))
    assert calls == []


def test_catalog_from_settings_carries_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAWG_API_KEY", "env-key")
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"count": 0, "results": []})

    catalog = GamesCatalog.from_settings(
        Settings(_env_file=None),
        transport=httpx.MockTransport(handler),
    )
    result = asyncio.run(catalog.list_genres(page=1, page_size=5))

    assert result.unwrap().results == []
    assert seen[0].url.params["key"] == "env-key"
