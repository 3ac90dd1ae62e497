import json

import pytest

from tddbook.bookswap.models import (
    Book,
    BookStatus,
    BookSwapError,
    NotFoundError,
    UnavailableError,
    User,
)


def test_status_strings():
    assert str(BookStatus("AVAILABLE")) == "AVAILABLE"
    assert str(BookStatus("SWAPPED")) == "SWAPPED"


def test_status_from_value():
    assert BookStatus("SWAPPED") is BookStatus.SWAPPED


def test_book_round_trip():
    book = Book(id="b1", name="Dune", author="Herbert", owner_id="u1", status="AVAILABLE")
    assert Book.from_dict(book.to_dict()) == book


def test_book_round_trip_through_json():
    book = Book(id="b2", name="Emma", author="Austen", status="SWAPPED")
    assert Book.from_dict(json.loads(json.dumps(book.to_dict()))) == book


def test_book_dict_keys():
    assert set(Book().to_dict()) == {"id", "name", "author", "owner_id", "status"}


def test_user_round_trip():
    user = User(id="u1", name="Ann", address="1 London Road", post_code="N1", country="UK")
    assert User.from_dict(user.to_dict()) == user


def test_user_dict_keys():
    assert set(User().to_dict()) == {"id", "name", "address", "post_code", "country"}


def test_from_dict_missing_and_null_fields_are_empty():
    user = User.from_dict({"name": "Ann", "country": None, "unknown": 5})
    assert user == User(name="Ann")


def test_from_dict_rejects_non_string_field():
    with pytest.raises(ValueError):
        Book.from_dict({"name": 12})


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        User.from_dict(["not", "an", "object"])


def test_errors_share_base():
    missing = NotFoundError("missing")
    taken = UnavailableError("taken")
    assert isinstance(missing, BookSwapError)
    assert isinstance(taken, BookSwapError)
    assert str(missing) == "missing"
    assert str(taken) == "taken"