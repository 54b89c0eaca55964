"""Aggregation pipelines over the book catalog.

Each report has a builder returning the raw pipeline and a runner that
executes it against a collection and converts the output to typed models.
Pipelines always run over the whole collection and are recomputed on every
call.
"""

from typing import Any, Dict, List, Optional

from pymongo.collection import Collection

from .schemas import AuthorBookCount, DecadeBucket, GenrePriceStats


def average_price_by_genre_pipeline() -> List[Dict[str, Any]]:
    # $avg ignores documents without a numeric price.
    return [
        {
            "$group": {
                "_id": "$genre",
                "averagePrice": {"$avg": "$price"},
                "count": {"$sum": 1},
            }
        },
        {"$sort": {"averagePrice": -1, "_id": 1}},
    ]


def top_author_pipeline() -> List[Dict[str, Any]]:
    """Count books per author and keep the largest group.

    Ties on count go to the lexicographically smallest author name.
    """
    return [
        {"$group": {"_id": "$author", "count": {"$sum": 1}}},
        {"$sort": {"count": -1, "_id": 1}},
        {"$limit": 1},
    ]


def books_by_decade_pipeline() -> List[Dict[str, Any]]:
    return [
        {
            "$addFields": {
                "decade": {
                    "$multiply": [
                        {"$floor": {"$divide": ["$published_year", 10]}},
                        10,
                    ]
                }
            }
        },
        {
            "$group": {
                "_id": "$decade",
                "count": {"$sum": 1},
                "titles": {"$push": "$title"},
            }
        },
        {"$sort": {"_id": 1}},
    ]


def average_price_by_genre(collection: Collection) -> List[GenrePriceStats]:
    """Average price and book count per genre, highest average first."""
    return [
        GenrePriceStats(
            genre=row["_id"],
            average_price=row.get("averagePrice"),
            count=row["count"],
        )
        for row in collection.aggregate(average_price_by_genre_pipeline())
    ]


def top_author(collection: Collection) -> Optional[AuthorBookCount]:
    """Author with the most books, or None for an empty collection."""
    rows = list(collection.aggregate(top_author_pipeline()))
    if not rows:
        return None
    return AuthorBookCount(author=rows[0]["_id"], count=rows[0]["count"])


def books_by_decade(collection: Collection) -> List[DecadeBucket]:
    """Book counts and titles per publication decade, oldest decade first.

    Records without a publication year are grouped under ``decade=None``.
    """
    buckets = []
    for row in collection.aggregate(books_by_decade_pipeline()):
        decade = row["_id"]
        buckets.append(
            DecadeBucket(
                decade=None if decade is None else int(decade),
                count=row["count"],
                titles=row["titles"],
            )
        )
    return buckets
