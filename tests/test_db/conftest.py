"""Shared fixtures and factory helpers for catalog tests.

Uses an in-memory mongomock collection — no running MongoDB required.
Each test gets a completely fresh client (function-scoped).
"""

import mongomock
import pytest

from bookstore.db.crud import BookCRUD
from bookstore.db.fixtures import SAMPLE_BOOKS
from bookstore.db.schemas import Book


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def collection():
    """Provide a fresh, empty in-memory books collection for each test."""
    client = mongomock.MongoClient()
    yield client["plp_bookstore"]["books"]
    client.close()


@pytest.fixture
def seeded(collection):
    """The books collection pre-loaded with the sample catalog."""
    BookCRUD.insert_many(collection, SAMPLE_BOOKS)
    return collection


# ---------------------------------------------------------------------------
# Factory helpers (plain functions, not fixtures, so tests can call them
# with custom arguments easily)
# ---------------------------------------------------------------------------


def make_book(
    title="Test Book",
    author="Test Author",
    genre="Fiction",
    published_year=2000,
    price=10.0,
    in_stock=True,
    pages=100,
    publisher="Test Press",
):
    return Book(
        title=title,
        author=author,
        genre=genre,
        published_year=published_year,
        price=price,
        in_stock=in_stock,
        pages=pages,
        publisher=publisher,
    )


def titles(rows):
    return [row["title"] for row in rows]
