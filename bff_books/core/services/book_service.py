"""Book business logic."""

from uuid import UUID, uuid4

from bff_books.core.exceptions import BookNotFoundError
from bff_books.core.storage import BookStore
from bff_books.entities.book import Book, CreateBookCommand


class BookService:
    """Facade over :class:`BookStore`.

    Command fields are not validated; whatever the caller sends is stored.
    """

    def __init__(self, store: BookStore):
        self._store = store

    def create(self, command: CreateBookCommand) -> Book:
        """Build a book with a fresh identifier and store it."""
        book = Book(
            id=uuid4(),
            author_id=command.author_id,
            title=command.title,
            pages=command.pages,
        )
        return self._store.insert(book)

    def get_books(self) -> list[Book]:
        return self._store.list_all()

    def find_by_id(self, book_id: UUID) -> Book | None:
        return self._store.find_by_id(book_id)

    def get_by_id(self, book_id: UUID) -> Book:
        """Return the book or raise :class:`BookNotFoundError`."""
        book = self._store.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book
