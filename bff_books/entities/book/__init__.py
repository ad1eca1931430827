"""Entity package: Book."""

from .entity import Book
from .schemas import BookResponse, CreateBookCommand

__all__ = ["Book", "BookResponse", "CreateBookCommand"]
