import pytest

from tddbook.toolbox.greetings import gather_greetings, greeting, main


def test_greeting_mentions_worker():
    text = greeting(7)
    assert text.startswith("Hello, friend!")
    assert "7" in text


def test_greetings_differ_by_worker():
    assert greeting(1) != greeting(2) and greeting(1) == greeting(1)


def test_gather_greetings_collects_every_worker():
    result = gather_greetings(5)
    assert list(result) == [0, 1, 2, 3, 4]
    assert all(result[i] == greeting(i) for i in result)


def test_gather_no_workers():
    assert gather_greetings(0) == {}


def test_gather_negative_rejected():
    with pytest.raises(ValueError):
        gather_greetings(-1)


def test_main_prints_greetings_then_goodbye(capsys):
    status = main(["--workers", "3"])
    lines = capsys.readouterr().out.splitlines()
    assert status == 0
    assert lines[-1] == "Goodbye, friend!"
    assert lines[:-1] == [greeting(i) for i in range(3)]


def test_main_default_worker_count(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[-1] == "Goodbye, friend!"