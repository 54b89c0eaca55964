"""Document database module.

This module provides the MongoDB side of the bookstore: configuration,
scoped client management, the catalog CRUD helpers, aggregation reports
and index/explain helpers.

Example:
    >>> from bookstore.db import MongoConfig, mongo_client, get_books_collection, BookCRUD
    >>> config = MongoConfig.from_env()
    >>> with mongo_client(config) as client:
    ...     books = get_books_collection(client, config)
    ...     BookCRUD.find_by_genre(books, "Fiction")
"""

from .config import MongoConfig, load_env_file
from .client import mongo_client, get_books_collection
from .schemas import (
    Book,
    InsertSummary,
    GenrePriceStats,
    AuthorBookCount,
    DecadeBucket,
    ExplainSummary,
    IndexComparison,
    validate_book,
)
from .fixtures import SAMPLE_BOOKS
from .crud import BookCRUD, DEFAULT_PAGE_SIZE
from .aggregations import (
    average_price_by_genre,
    top_author,
    books_by_decade,
)
from .indexing import (
    create_indexes,
    explain_query,
    compare_title_lookup,
)

__all__ = [
    # Config
    "MongoConfig",
    "load_env_file",
    # Client
    "mongo_client",
    "get_books_collection",
    # Schemas
    "Book",
    "InsertSummary",
    "GenrePriceStats",
    "AuthorBookCount",
    "DecadeBucket",
    "ExplainSummary",
    "IndexComparison",
    "validate_book",
    # Fixtures
    "SAMPLE_BOOKS",
    # CRUD
    "BookCRUD",
    "DEFAULT_PAGE_SIZE",
    # Aggregations
    "average_price_by_genre",
    "top_author",
    "books_by_decade",
    # Indexing
    "create_indexes",
    "explain_query",
    "compare_title_lookup",
]
