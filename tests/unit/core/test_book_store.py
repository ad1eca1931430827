"""Unit tests for the in-memory book store."""

from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

import pytest

from bff_books.core.exceptions import DuplicateBookError
from bff_books.core.storage import BookStore
from bff_books.entities.book import Book


def make_book(title: str = "Dune", pages: int = 412) -> Book:
    return Book(author_id=uuid4(), title=title, pages=pages)


class TestBookStore:
    """Test insert, lookup and listing."""

    def test_empty_store(self, book_store: BookStore):
        """Should start without records."""
        assert book_store.list_all() == []
        assert len(book_store) == 0

    def test_insert_and_find(self, book_store: BookStore):
        """Should return the stored record by its identifier."""
        book = make_book()
        assert book_store.insert(book) is book

        assert book_store.find_by_id(book.id) == book
        assert book.id in book_store

    def test_find_missing_returns_none(self, book_store: BookStore):
        """Should signal absence with None rather than an error."""
        assert book_store.find_by_id(uuid4()) is None

    def test_insert_duplicate_identifier(self, book_store: BookStore):
        """Should refuse a second record with the same identifier."""
        book = make_book()
        book_store.insert(book)

        clash = Book(id=book.id, author_id=uuid4(), title="Other", pages=1)
        with pytest.raises(DuplicateBookError):
            book_store.insert(clash)

        assert book_store.find_by_id(book.id) == book
        assert len(book_store) == 1

    def test_list_all_keeps_insertion_order(self, book_store: BookStore):
        """Should list every record in the order it was inserted."""
        books = [make_book(title=f"Book {i}") for i in range(5)]
        for book in books:
            book_store.insert(book)

        assert book_store.list_all() == books

    def test_list_all_returns_snapshot(self, book_store: BookStore):
        """Should not expose the internal container."""
        book_store.insert(make_book())
        snapshot = book_store.list_all()
        snapshot.clear()

        assert len(book_store) == 1

    def test_concurrent_inserts(self, book_store: BookStore):
        """Should keep every record when many threads insert at once."""
        books = [make_book(title=f"Book {i}") for i in range(200)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(book_store.insert, books))

        assert len(book_store) == 200
        assert {b.id for b in book_store.list_all()} == {b.id for b in books}
