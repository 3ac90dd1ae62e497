"""Posting of swapped books to their new owners."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from tddbook.bookswap.models import Book

logger = logging.getLogger(__name__)


@runtime_checkable
class PostingService(Protocol):
    """Sends a book to be posted."""

    def new_order(self, book: Book) -> None: ...


class StubbedPostingService:
    """A posting service that only logs the order."""

    def new_order(self, book: Book) -> None:
        """Record that ``book`` has been posted."""
        logger.info("STUBBED POSTING SERVICE: book %s posted: %s", book.id, book)