"""CRUD helpers for the book catalog collection.

``BookCRUD`` exposes one static method per catalog operation. Every method
takes the target ``Collection`` explicitly and returns plain values: reads
return lists of projected dicts, the update returns the post-update record
or ``None`` and the delete returns the number of removed records.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import BulkWriteError

from .schemas import (
    TITLE_AUTHOR,
    TITLE_AUTHOR_PRICE,
    TITLE_GENRE_PRICE,
    TITLE_PRICE,
    TITLE_YEAR,
    WITHOUT_ID,
    Book,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 5

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _require_positive(value: int, field_name: str) -> int:
    """Validate that a value is an integer of at least 1."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{field_name} must be >= 1, got {value}")
    return value


def _validate_price(price: float) -> float:
    """Validate that a price is a non-negative number."""
    if not isinstance(price, (int, float)) or isinstance(price, bool):
        raise ValueError(f"price must be a number, got {type(price).__name__}")
    if price < 0:
        raise ValueError(f"price must be >= 0, got {price}")
    return price


class BookCRUD:
    # -- Create -------------------------------------------------------------

    @staticmethod
    def insert_many(collection: Collection, books: Iterable[Book]) -> int:
        """Insert ``books`` in a single ordered batch.

        Insertion stops at the first failing document. The error is re-raised
        after logging how many documents made it in.

        Returns:
            Number of inserted documents
        """
        documents = [book.to_document() for book in books]
        if not documents:
            return 0
        try:
            result = collection.insert_many(documents, ordered=True)
        except BulkWriteError as e:
            logger.error(
                "Ordered insert stopped after %d documents: %s",
                e.details.get("nInserted", 0),
                e.details.get("writeErrors"),
            )
            raise
        return len(result.inserted_ids)

    # -- Read ---------------------------------------------------------------

    @staticmethod
    def find_by_genre(collection: Collection, genre: str) -> list[dict[str, Any]]:
        return list(collection.find({"genre": genre}, TITLE_AUTHOR_PRICE))

    @staticmethod
    def find_published_after(collection: Collection, year: int) -> list[dict[str, Any]]:
        return list(collection.find({"published_year": {"$gt": year}}, TITLE_YEAR))

    @staticmethod
    def find_by_author(collection: Collection, author: str) -> list[dict[str, Any]]:
        return list(collection.find({"author": author}, TITLE_GENRE_PRICE))

    @staticmethod
    def find_in_stock_published_after(
        collection: Collection, year: int
    ) -> list[dict[str, Any]]:
        query = {"in_stock": True, "published_year": {"$gt": year}}
        return list(collection.find(query, TITLE_AUTHOR_PRICE))

    @staticmethod
    def list_all(collection: Collection) -> list[dict[str, Any]]:
        return list(collection.find({}, TITLE_AUTHOR_PRICE))

    @staticmethod
    def sort_by_price(
        collection: Collection, descending: bool = False
    ) -> list[dict[str, Any]]:
        """Return every book's title and price ordered by price.

        Equal prices fall back to title order so the output is deterministic.
        """
        direction = DESCENDING if descending else ASCENDING
        cursor = collection.find({}, TITLE_PRICE).sort(
            [("price", direction), ("title", ASCENDING)]
        )
        return list(cursor)

    @staticmethod
    def get_page(
        collection: Collection,
        page_number: int,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[dict[str, Any]]:
        """Return one page of titles and authors in title order.

        Page ``n`` covers offsets ``(n - 1) * page_size`` through
        ``n * page_size - 1``. Pages past the end are empty.
        """
        page_number = _require_positive(page_number, "page_number")
        page_size = _require_positive(page_size, "page_size")
        skip = (page_number - 1) * page_size
        cursor = (
            collection.find({}, TITLE_AUTHOR)
            .sort("title", ASCENDING)
            .skip(skip)
            .limit(page_size)
        )
        return list(cursor)

    @staticmethod
    def get_by_title(collection: Collection, title: str) -> dict[str, Any] | None:
        return collection.find_one({"title": title}, WITHOUT_ID)

    @staticmethod
    def count(collection: Collection) -> int:
        return collection.count_documents({})

    # -- Update -------------------------------------------------------------

    @staticmethod
    def update_price_by_title(
        collection: Collection, title: str, new_price: float
    ) -> dict[str, Any] | None:
        """Set the price of the first book titled ``title``.

        Returns:
            The updated record without ``_id``, or None if no book matched
        """
        new_price = _validate_price(new_price)
        return collection.find_one_and_update(
            {"title": title},
            {"$set": {"price": new_price}},
            projection=WITHOUT_ID,
            return_document=ReturnDocument.AFTER,
        )

    # -- Delete -------------------------------------------------------------

    @staticmethod
    def delete_by_title(collection: Collection, title: str) -> int:
        """Delete at most one book titled ``title`` and return the count removed."""
        result = collection.delete_one({"title": title})
        return result.deleted_count
