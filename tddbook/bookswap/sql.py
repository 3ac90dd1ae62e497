"""Book and user stores backed by a SQLite database."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace

from tddbook.bookswap.models import (
    Book,
    BookStatus,
    NotFoundError,
    UnavailableError,
    User,
)
from tddbook.bookswap.posting import PostingService

_NOT_FOUND = "record not found"
_BOOK_COLUMNS = ("id", "name", "author", "owner_id", "status")
_USER_COLUMNS = ("id", "name", "address", "post_code", "country")


def _table_sql(table: str, columns: tuple[str, ...]) -> str:
    rest = ", ".join(f"{c} TEXT NOT NULL DEFAULT ''" for c in columns[1:])
    return f"CREATE TABLE IF NOT EXISTS {table} (id TEXT PRIMARY KEY, {rest});"


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the books and users tables if they do not exist."""
    with connection:
        connection.execute(_table_sql("books", _BOOK_COLUMNS))
        connection.execute(_table_sql("users", _USER_COLUMNS))


def _upsert_sql(table: str, columns: tuple[str, ...]) -> str:
    names = ", ".join(columns)
    marks = ", ".join("?" for _ in columns)
    updates = ", ".join(f"{c} = excluded.{c}" for c in columns[1:])
    return (
        f"INSERT INTO {table} ({names}) VALUES ({marks}) "
        f"ON CONFLICT(id) DO UPDATE SET {updates}"
    )


class SqlBookService:
    """Stores books in the ``books`` table."""

    _select = f"SELECT {', '.join(_BOOK_COLUMNS)} FROM books"

    def __init__(
        self,
        connection: sqlite3.Connection,
        posting_service: PostingService | None = None,
    ) -> None:
        self.connection = connection
        self.posting_service = posting_service

    def _find(self, book_id: str) -> Book | None:
        row = self.connection.execute(f"{self._select} WHERE id = ?", (book_id,)).fetchone()
        return Book(*row) if row is not None else None

    def _query(self, where: str, value: str) -> list[Book]:
        rows = self.connection.execute(f"{self._select} WHERE {where} = ?", (value,))
        return [Book(*row) for row in rows]

    def get(self, book_id: str) -> Book:
        """Return the book with ``book_id``; raise NotFoundError if none."""
        book = self._find(book_id)
        if book is None:
            raise NotFoundError(_NOT_FOUND)
        return book

    def upsert(self, book: Book) -> Book:
        """Save ``book``; an unknown id gets a new id and AVAILABLE status."""
        if self._find(book.id) is None:
            book = replace(book, id=str(uuid.uuid4()), status=BookStatus.AVAILABLE.value)
        with self.connection:
            self.connection.execute(
                _upsert_sql("books", _BOOK_COLUMNS),
                tuple(getattr(book, c) for c in _BOOK_COLUMNS),
            )
        return book

    def list_available(self) -> list[Book]:
        """The books that can be swapped."""
        return self._query("status", BookStatus.AVAILABLE.value)

    def list_by_user(self, user_id: str) -> list[Book]:
        """The books owned by ``user_id``."""
        return self._query("owner_id", user_id)

    def swap_book(self, book_id: str, user_id: str) -> Book:
        """Give an available book to ``user_id`` and mark it swapped."""
        book = self._find(book_id)
        if book is None:
            raise NotFoundError(f"no book found for id {book_id}:{_NOT_FOUND}")
        if book.status != BookStatus.AVAILABLE.value:
            raise UnavailableError(f"book {book_id} is not available for swapping")
        return self.upsert(replace(book, owner_id=user_id, status=BookStatus.SWAPPED.value))


class SqlUserService:
    """Stores users in the ``users`` table."""

    _select = f"SELECT {', '.join(_USER_COLUMNS)} FROM users"

    def __init__(self, connection: sqlite3.Connection, book_service: SqlBookService) -> None:
        self.connection = connection
        self.book_service = book_service

    def _find(self, user_id: str) -> User | None:
        row = self.connection.execute(f"{self._select} WHERE id = ?", (user_id,)).fetchone()
        return User(*row) if row is not None else None

    def get(self, user_id: str) -> tuple[User, list[Book]]:
        """Return the user and the books they own; raise NotFoundError if none."""
        user = self._find(user_id)
        if user is None:
            raise NotFoundError(f"no user found for id {user_id}:{_NOT_FOUND}")
        return user, self.book_service.list_by_user(user_id)

    def exists(self, user_id: str) -> bool:
        """Return True if the user exists; raise NotFoundError otherwise."""
        if self._find(user_id) is None:
            raise NotFoundError(f"no user found for id {user_id}:{_NOT_FOUND}")
        return True

    def upsert(self, user: User) -> User:
        """Save ``user``; an unknown id is replaced by a new one."""
        if self._find(user.id) is None:
            user = replace(user, id=str(uuid.uuid4()))
        with self.connection:
            self.connection.execute(
                _upsert_sql("users", _USER_COLUMNS),
                tuple(getattr(user, c) for c in _USER_COLUMNS),
            )
        return user