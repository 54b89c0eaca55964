"""Schemas for catalog records and query results."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Projections used by the catalog reads. ``_id`` is always suppressed.
TITLE_AUTHOR_PRICE = {"title": 1, "author": 1, "price": 1, "_id": 0}
TITLE_YEAR = {"title": 1, "published_year": 1, "_id": 0}
TITLE_GENRE_PRICE = {"title": 1, "genre": 1, "price": 1, "_id": 0}
TITLE_PRICE = {"title": 1, "price": 1, "_id": 0}
TITLE_AUTHOR = {"title": 1, "author": 1, "_id": 0}
WITHOUT_ID = {"_id": 0}


class Book(BaseModel):
    """A single catalog entry.

    Attributes:
        title: Book title, unique within the fixture
        author: Author name
        genre: Genre label
        published_year: Year of publication
        price: List price
        in_stock: Whether the book is currently available
        pages: Number of pages
        publisher: Publishing house
    """

    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    genre: str = Field(..., description="Book genre")
    published_year: int = Field(..., description="Publication year", ge=1000, le=9999)
    price: float = Field(..., description="List price", ge=0.0)
    in_stock: bool = Field(..., description="Availability flag")
    pages: int = Field(..., description="Number of pages", ge=1)
    publisher: str = Field(..., description="Publisher")

    @field_validator("title", "author", "genre", "publisher")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only strings."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "The Silent Orchard",
                "author": "Ava Harper",
                "genre": "Fiction",
                "published_year": 2018,
                "price": 14.99,
                "in_stock": True,
                "pages": 320,
                "publisher": "Harbor Press",
            }
        }
    )

    def to_document(self) -> Dict[str, Any]:
        """Return the plain dict stored in the collection."""
        return self.model_dump()


class InsertSummary(BaseModel):
    """Outcome of a seeding run."""

    inserted_count: int
    namespace: str


class GenrePriceStats(BaseModel):
    """Average price and number of books for one genre."""

    genre: Optional[str]
    average_price: Optional[float]
    count: int


class AuthorBookCount(BaseModel):
    author: Optional[str]
    count: int


class DecadeBucket(BaseModel):
    """Books published within one decade."""

    decade: Optional[int]
    count: int
    titles: List[str]


class ExplainSummary(BaseModel):
    """Execution statistics reported by the server for one query.

    Every field is passed through from the explain output as reported;
    a section missing from the output leaves its fields as ``None``.
    """

    total_docs_examined: Optional[int] = None
    total_keys_examined: Optional[int] = None
    execution_time_millis: Optional[int] = None
    winning_plan: Optional[Dict[str, Any]] = None


class IndexComparison(BaseModel):
    """Explain summaries captured around index creation."""

    before: ExplainSummary
    created_indexes: List[str]
    after: ExplainSummary
    compound: ExplainSummary


def validate_book(record: dict) -> Book:
    """Validate and parse a raw catalog record.

    Args:
        record: Dictionary containing book fields

    Returns:
        Validated Book instance

    Raises:
        ValidationError: If the record is invalid
    """
    return Book(**record)
