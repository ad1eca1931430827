from .book_store import BookStore

__all__ = ["BookStore"]
