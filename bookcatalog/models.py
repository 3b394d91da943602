# bookcatalog/models.py
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_authors(value):
    # un seul auteur peut être fourni sous forme de chaîne
    if isinstance(value, str):
        return (value,)
    return value


class BookCreate(BaseModel):
    """Body of ``POST /api/books``. Any ``id`` sent by the client is ignored."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    authors: Tuple[str, ...]
    isbn: str = ""
    published_year: Optional[int] = Field(default=None, alias="publishedYear")

    @field_validator("authors", mode="before")
    @classmethod
    def normalize_authors(cls, value):
        return _as_authors(value)


class Book(BaseModel):
    """A catalog record. Instances are frozen; ``authors`` keeps its order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[int] = None
    title: str
    authors: Tuple[str, ...]
    isbn: str = ""
    published_year: Optional[int] = Field(default=None, alias="publishedYear")

    @field_validator("authors", mode="before")
    @classmethod
    def normalize_authors(cls, value):
        return _as_authors(value)

    @classmethod
    def from_create(cls, req: BookCreate) -> "Book":
        return cls(
            title=req.title,
            authors=req.authors,
            isbn=req.isbn,
            published_year=req.published_year,
        )
