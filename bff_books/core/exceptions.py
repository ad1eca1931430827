"""Domain errors raised by the book store and service."""

from uuid import UUID


class BookServiceError(Exception):
    """Base class for book domain errors."""


class BookNotFoundError(BookServiceError):
    """Raised when a lookup by identifier finds nothing."""

    def __init__(self, book_id: UUID):
        self.book_id = book_id
        super().__init__("Book isn't found")


class DuplicateBookError(BookServiceError):
    """Raised when inserting a book whose identifier is already stored."""

    def __init__(self, book_id: UUID):
        self.book_id = book_id
        super().__init__(f"Book {book_id} already exists")
