"""Command line entry point that serves the book swapping service."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Callable, TypeVar

from werkzeug.serving import run_simple

from tddbook.bookswap.memory import BookService, UserService
from tddbook.bookswap.models import Book, User
from tddbook.bookswap.posting import StubbedPostingService
from tddbook.bookswap.web import Handler, create_app

_T = TypeVar("_T")


def _load_list(path: str | Path | None, factory: Callable[[Any], _T]) -> list[_T]:
    if path is None:
        return []
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array")
    return [factory(item) for item in data]


def load_initial(
    books_path: str | Path | None, users_path: str | Path | None
) -> tuple[list[Book], list[User]]:
    """Read the initial books and users from JSON array files; a missing path gives none."""
    return _load_list(books_path, Book.from_dict), _load_list(users_path, User.from_dict)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the initial data and serve the service until stopped."""
    parser = argparse.ArgumentParser(description="Serve the BookSwap service.")
    parser.add_argument("--books", help="JSON file with the initial books")
    parser.add_argument("--users", help="JSON file with the initial users")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    try:
        books, users = load_initial(args.books, args.users)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    book_service = BookService(books, StubbedPostingService())
    user_service = UserService(users, book_service)
    app = create_app(Handler(book_service, user_service))
    print(f"Listening on {args.host}:{args.port}...")
    run_simple(args.host, args.port, app)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())