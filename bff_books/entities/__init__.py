"""Entities module, one package per business concept."""

from .book import Book, BookResponse, CreateBookCommand

__all__ = ["Book", "BookResponse", "CreateBookCommand"]
