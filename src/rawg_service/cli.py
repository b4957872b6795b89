"""CLI entrypoint for rawg-service."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pydantic import BaseModel

from rawg_service.catalog import DEFAULT_PAGE_SIZE, GamesCatalog
from rawg_service.errors import Result, ServiceError
from rawg_service.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _build_catalog(settings: Settings) -> GamesCatalog:
    return GamesCatalog.from_settings(settings)


def _emit(result: Result[Any]) -> int:
    value = result.unwrap()
    payload = value.model_dump(mode="json") if isinstance(value, BaseModel) else value
    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


def _cmd_games(args: argparse.Namespace, catalog: GamesCatalog) -> int:
    genres = [item.strip() for item in args.genres.split(",") if item.strip()]
    result = asyncio.run(
        catalog.list_games(
            page=args.page,
            page_size=args.page_size,
            search=args.search or None,
            ordering=args.ordering or None,
            genres=genres or None,
        )
    )
    return _emit(result)


def _cmd_game(args: argparse.Namespace, catalog: GamesCatalog) -> int:
    return _emit(asyncio.run(catalog.get_game(args.game_id)))


def _cmd_genres(args: argparse.Namespace, catalog: GamesCatalog) -> int:
    result = asyncio.run(catalog.list_genres(page=args.page, page_size=args.page_size))
    return _emit(result)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rawg-service")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument(
        "--base-url",
        default="",
        help="Override the API base URL for this invocation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    games = subparsers.add_parser("games", help="List games")
    games.add_argument("--page", type=int, default=1)
    games.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE)
    games.add_argument("--search", default="")
    games.add_argument("--ordering", default="", help="RAWG ordering, e.g. -rating")
    games.add_argument("--genres", default="", help="Comma-separated genre slugs")
    games.set_defaults(func=_cmd_games)

    game = subparsers.add_parser("game", help="Show one game by id or slug")
    game.add_argument("game_id")
    game.set_defaults(func=_cmd_game)

    genres = subparsers.add_parser("genres", help="List genres")
    genres.add_argument("--page", type=int, default=1)
    genres.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE)
    genres.set_defaults(func=_cmd_genres)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    settings = Settings()
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url})
    try:
        return int(func(args, _build_catalog(settings)))
    except (ServiceError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
