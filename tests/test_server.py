import json
from unittest import mock

import pytest
from werkzeug.test import Client

from tddbook.bookswap.models import Book, User
from tddbook.bookswap.server import load_initial, main

BOOKS = [
    {"id": "b1", "name": "First", "author": "One", "owner_id": "u1", "status": "AVAILABLE"},
    {"id": "b2", "name": "Second", "author": "Two", "owner_id": "u1", "status": "SWAPPED"},
]
USERS = [
    {"id": "u1", "name": "Reader", "address": "1 London Road", "post_code": "N1", "country": "UK"},
]


@pytest.fixture
def data_files(tmp_path):
    books_path = tmp_path / "books.json"
    users_path = tmp_path / "users.json"
    books_path.write_text(json.dumps(BOOKS), encoding="utf-8")
    users_path.write_text(json.dumps(USERS), encoding="utf-8")
    return books_path, users_path


def test_load_initial_round_trip(data_files):
    books, users = load_initial(*data_files)
    assert [b.to_dict() for b in books] == BOOKS
    assert [u.to_dict() for u in users] == USERS
    assert all(isinstance(b, Book) for b in books)
    assert all(isinstance(u, User) for u in users)


def test_load_initial_without_paths():
    assert load_initial(None, None) == ([], [])


def test_load_initial_rejects_non_array(tmp_path):
    path = tmp_path / "books.json"
    path.write_text(json.dumps({"id": "b1"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_initial(path, None)


def test_load_initial_rejects_bad_json(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError):
        load_initial(None, path)


def test_main_serves_loaded_data(data_files, capsys):
    books_path, users_path = data_files
    with mock.patch("tddbook.bookswap.server.run_simple") as run:
        status = main(["--books", str(books_path), "--users", str(users_path)])
    assert status == 0
    assert "Listening on localhost:3000..." in capsys.readouterr().out
    host, port, app = run.call_args.args
    assert (host, port) == ("localhost", 3000)
    client = Client(app)
    body = json.loads(client.get("/books").get_data(as_text=True))
    assert body == {"books": [BOOKS[0]]}
    user_body = json.loads(client.get("/users/u1").get_data(as_text=True))
    assert user_body["user"] == USERS[0]
    assert len(user_body["books"]) == len(BOOKS)


def test_main_fails_on_missing_file(tmp_path, capsys):
    with mock.patch("tddbook.bookswap.server.run_simple") as run:
        status = main(["--books", str(tmp_path / "absent.json")])
    assert status == 1
    assert run.call_count == 0
    assert capsys.readouterr().err