import logging

from tddbook.bookswap.models import Book
from tddbook.bookswap.posting import PostingService, StubbedPostingService


def test_new_order_logs_book(caplog):
    caplog.set_level(logging.INFO, logger="tddbook.bookswap.posting")
    book = Book(id="book-42", name="Emma")
    result = StubbedPostingService().new_order(book)
    assert result is None
    assert "STUBBED POSTING SERVICE" in caplog.text
    assert "book-42" in caplog.text


def test_stub_satisfies_protocol():
    service = StubbedPostingService()
    assert isinstance(service, PostingService)
    assert len(caplog_free_orders(service)) == 2


def caplog_free_orders(service):
    return [service.new_order(Book(id=str(i))) for i in range(2)]