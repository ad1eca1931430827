"""In-memory storage for books."""

import threading
from uuid import UUID

from loguru import logger

from bff_books.core.exceptions import DuplicateBookError
from bff_books.entities.book import Book


class BookStore:
    """Thread-safe in-memory book storage.

    Records live for the lifetime of the process. Insertion order is kept
    because the backing dict preserves it.
    """

    def __init__(self) -> None:
        self._books: dict[UUID, Book] = {}
        self._lock = threading.RLock()

    def insert(self, book: Book) -> Book:
        with self._lock:
            if book.id in self._books:
                raise DuplicateBookError(book.id)
            self._books[book.id] = book
        logger.debug("Stored book {}", book.id)
        return book

    def find_by_id(self, book_id: UUID) -> Book | None:
        with self._lock:
            return self._books.get(book_id)

    def list_all(self) -> list[Book]:
        with self._lock:
            return list(self._books.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        with self._lock:
            return book_id in self._books
