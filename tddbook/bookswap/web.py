"""HTTP handlers and routing of the book swapping service."""

from __future__ import annotations

import json
import sqlite3
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from werkzeug.exceptions import HTTPException
from werkzeug.routing import Map, Rule
from werkzeug.wrappers import Request
from werkzeug.wrappers import Response as HttpResponse

from tddbook.bookswap.models import Book, BookSwapError, User

_MAX_BODY = 1048576
_CONTENT_TYPE = "application/json; charset=UTF-8"
_WELCOME = "Welcome to the BookSwap service!"
_STORE_ERRORS = (BookSwapError, sqlite3.Error)

_T = TypeVar("_T")


class _BookStore(Protocol):
    def upsert(self, book: Book) -> Book: ...

    def list_available(self) -> list[Book]: ...

    def swap_book(self, book_id: str, user_id: str) -> Book: ...


class _UserStore(Protocol):
    def get(self, user_id: str) -> tuple[User, list[Book]]: ...

    def exists(self, user_id: str) -> bool: ...

    def upsert(self, user: User) -> User: ...


@dataclass
class Response:
    """The JSON body every endpoint answers with; empty parts are left out."""

    message: str = ""
    error: str = ""
    books: list[Book] = field(default_factory=list)
    user: User | None = None

    def to_dict(self) -> dict[str, Any]:
        """The JSON object form, without empty fields."""
        body: dict[str, Any] = {}
        if self.message:
            body["message"] = self.message
        if self.error:
            body["error"] = self.error
        if self.books:
            body["books"] = [book.to_dict() for book in self.books]
        if self.user is not None:
            body["user"] = self.user.to_dict()
        return body


class _BadBody(Exception):
    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


def _write(status: int, resp: Response) -> HttpResponse:
    body = json.dumps(resp.to_dict()) + "\n"
    return HttpResponse(body, status=status, content_type=_CONTENT_TYPE)


def _parse_body(request: Request, factory: Callable[[Any], _T], kind: str) -> _T:
    try:
        raw = request.stream.read(_MAX_BODY)
    except OSError as exc:
        raise _BadBody(500, f"invalid {kind} body:{exc}") from exc
    try:
        return factory(json.loads(raw))
    except ValueError as exc:
        raise _BadBody(422, f"invalid {kind} body:{exc}") from exc


class Handler:
    """Serves the service's endpoints from a book store and a user store."""

    def __init__(self, book_service: _BookStore, user_service: _UserStore | None) -> None:
        self.book_service = book_service
        self.user_service = user_service

    def _users(self) -> _UserStore:
        if self.user_service is None:
            raise BookSwapError("no user service configured")
        return self.user_service

    def index(self, request: Request) -> HttpResponse:
        """GET /: a welcome message and the available books."""
        try:
            books = self.book_service.list_available()
        except _STORE_ERRORS as exc:
            return _write(500, Response(error=str(exc)))
        return _write(200, Response(message=_WELCOME, books=books))

    def list_books(self, request: Request) -> HttpResponse:
        """GET /books: the available books."""
        try:
            books = self.book_service.list_available()
        except _STORE_ERRORS as exc:
            return _write(500, Response(error=str(exc)))
        return _write(200, Response(books=books))

    def user_upsert(self, request: Request) -> HttpResponse:
        """POST /users: create a user from the JSON body."""
        try:
            user = _parse_body(request, User.from_dict, "user")
        except _BadBody as bad:
            return _write(bad.status, Response(error=str(bad)))
        try:
            user = self._users().upsert(user)
        except _STORE_ERRORS as exc:
            return _write(400, Response(error=str(exc)))
        return _write(200, Response(user=user))

    def list_user_by_id(self, request: Request, id: str) -> HttpResponse:
        """GET /users/<id>: the user and the books they own."""
        try:
            user, books = self._users().get(id)
        except _STORE_ERRORS as exc:
            return _write(404, Response(error=str(exc)))
        return _write(200, Response(user=user, books=books))

    def swap_book(self, request: Request, id: str) -> HttpResponse:
        """POST /books/<id>?user=<user id>: swap the book to that user."""
        user_id = request.args.get("user", "")
        try:
            self._users().exists(user_id)
        except _STORE_ERRORS as exc:
            return _write(400, Response(error=str(exc)))
        try:
            book = self.book_service.swap_book(id, user_id)
        except _STORE_ERRORS as exc:
            return _write(404, Response(error=str(exc)))
        return _write(200, Response(books=[book]))

    def book_upsert(self, request: Request) -> HttpResponse:
        """POST /books: add a book from the JSON body for an existing owner."""
        try:
            book = _parse_body(request, Book.from_dict, "book")
        except _BadBody as bad:
            return _write(bad.status, Response(error=str(bad)))
        try:
            self._users().exists(book.owner_id)
        except _STORE_ERRORS as exc:
            return _write(400, Response(error=str(exc)))
        book = self.book_service.upsert(book)
        return _write(200, Response(books=[book]))


def create_app(handler: Handler) -> Callable[..., Any]:
    """Build the WSGI application routing requests to ``handler``."""
    url_map = Map(
        [
            Rule("/", endpoint="index", methods=["GET"]),
            Rule("/books", endpoint="list_books", methods=["GET"]),
            Rule("/users", endpoint="user_upsert", methods=["POST"]),
            Rule("/users/<id>", endpoint="list_user_by_id", methods=["GET"]),
            Rule("/books/<id>", endpoint="swap_book", methods=["POST"]),
            Rule("/books", endpoint="book_upsert", methods=["POST"]),
        ]
    )
    endpoints: dict[str, Callable[..., HttpResponse]] = {
        "index": handler.index,
        "list_books": handler.list_books,
        "user_upsert": handler.user_upsert,
        "list_user_by_id": handler.list_user_by_id,
        "swap_book": handler.swap_book,
        "book_upsert": handler.book_upsert,
    }

    @Request.application  # type: ignore[arg-type]
    def app(request: Request) -> Any:
        adapter = url_map.bind_to_environ(request.environ)
        try:
            endpoint, args = adapter.match()
        except HTTPException as exc:
            return exc
        return endpoints[endpoint](request, **args)

    return app