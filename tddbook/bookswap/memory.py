"""In-memory book and user stores."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import replace

from tddbook.bookswap.models import (
    Book,
    BookStatus,
    NotFoundError,
    UnavailableError,
    User,
)
from tddbook.bookswap.posting import PostingService


class BookService:
    """Keeps books in memory, keyed by id."""

    def __init__(
        self,
        initial: Iterable[Book] = (),
        posting_service: PostingService | None = None,
    ) -> None:
        self._books: dict[str, Book] = {book.id: book for book in initial}
        self.posting_service = posting_service

    def get(self, book_id: str) -> Book:
        """Return the book with ``book_id``; raise NotFoundError if none."""
        try:
            return self._books[book_id]
        except KeyError:
            raise NotFoundError("no book found") from None

    def upsert(self, book: Book) -> Book:
        """Store ``book``; an unknown id gets a new id and AVAILABLE status."""
        if book.id not in self._books:
            book = replace(book, id=str(uuid.uuid4()), status=BookStatus.AVAILABLE.value)
        self._books[book.id] = book
        return book

    def list_available(self) -> list[Book]:
        """The books that can be swapped."""
        return [b for b in self._books.values() if b.status == BookStatus.AVAILABLE.value]

    def list_by_user(self, user_id: str) -> list[Book]:
        """The books owned by ``user_id``."""
        return [b for b in self._books.values() if b.owner_id == user_id]

    def swap_book(self, book_id: str, user_id: str) -> Book:
        """Give an available book to ``user_id`` and mark it swapped."""
        book = self._books.get(book_id)
        if book is None:
            raise NotFoundError(f"no book found for id {book_id}")
        if book.status != BookStatus.AVAILABLE.value:
            raise UnavailableError(f"book {book_id} is not available for swapping")
        book = replace(book, owner_id=user_id, status=BookStatus.SWAPPED.value)
        self._books[book_id] = book
        return book


class UserService:
    """Keeps users in memory, keyed by id."""

    def __init__(self, initial: Iterable[User] = (), book_service: BookService | None = None) -> None:
        self._users: dict[str, User] = {user.id: user for user in initial}
        self.book_service = book_service if book_service is not None else BookService()

    def get(self, user_id: str) -> tuple[User, list[Book]]:
        """Return the user and the books they own; raise NotFoundError if none."""
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"no user found for id {user_id}")
        return user, self.book_service.list_by_user(user_id)

    def exists(self, user_id: str) -> bool:
        """Return True if the user exists; raise NotFoundError otherwise."""
        if user_id not in self._users:
            raise NotFoundError(f"no user found for id {user_id}")
        return True

    def upsert(self, user: User) -> User:
        """Store ``user`` under a freshly generated id and return it."""
        user = replace(user, id=str(uuid.uuid4()))
        self._users[user.id] = user
        return user