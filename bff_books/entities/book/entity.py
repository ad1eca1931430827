"""Entity: Book."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """Book entity held by the in-memory store.

    Books are created once and never change afterwards, so the model is
    frozen. ``author_id`` references an author owned by another service.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    author_id: UUID = Field(description="Identifier of the book's author")
    title: str = Field(description="Title")
    pages: int = Field(description="Page count")
