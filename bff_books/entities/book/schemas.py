"""Request and response payloads for the book API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .entity import Book


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateBookCommand(_CamelModel):
    """Payload of ``POST /api/v1/books``.

    Field values are taken as-is: a negative page count or an empty title is
    accepted.
    """

    author_id: UUID
    title: str
    pages: int


class BookResponse(_CamelModel):
    """Client-facing projection of a :class:`Book`."""

    id: UUID
    author_id: UUID
    title: str
    pages: int

    @classmethod
    def from_book(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id,
            author_id=book.author_id,
            title=book.title,
            pages=book.pages,
        )

    def to_message(self) -> str:
        """Serialize for the pub/sub channel as indented camelCase JSON."""
        return self.model_dump_json(by_alias=True, indent=2)


__all__ = ["BookResponse", "CreateBookCommand"]
