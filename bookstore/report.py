"""Console report for the catalog query battery.

Runs every catalog operation in a fixed order and prints each result. All
query logic lives in ``bookstore.db``; this module only formats output.
"""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from pydantic import BaseModel
from pymongo.collection import Collection

from bookstore.db import aggregations, indexing
from bookstore.db.crud import DEFAULT_PAGE_SIZE, BookCRUD

SAMPLE_GENRE = "Non-Fiction"
SAMPLE_YEAR = 2015
SAMPLE_AUTHOR = "Samuel Reed"
SAMPLE_UPDATE_TITLE = "The Silent Orchard"
SAMPLE_UPDATE_PRICE = 12.49
SAMPLE_DELETE_TITLE = "Memoirs of a Voyager"
IN_STOCK_AFTER_YEAR = 2010


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


def _dump(out: TextIO, heading: str, value: Any) -> None:
    print(f"\n{heading}", file=out)
    print(json.dumps(_to_jsonable(value), indent=2, default=str), file=out)


def _section(out: TextIO, title: str) -> None:
    print(f"\n--- {title} ---", file=out)


def run_query_battery(collection: Collection, out: TextIO | None = None) -> None:
    """Run every catalog query, mutation, report and explain in sequence."""
    out = out or sys.stdout

    _section(out, "Basic CRUD Operations")
    _dump(
        out,
        f'1) Books in genre "{SAMPLE_GENRE}":',
        BookCRUD.find_by_genre(collection, SAMPLE_GENRE),
    )
    _dump(
        out,
        f"2) Books published after {SAMPLE_YEAR}:",
        BookCRUD.find_published_after(collection, SAMPLE_YEAR),
    )
    _dump(
        out,
        f'3) Books by author "{SAMPLE_AUTHOR}":',
        BookCRUD.find_by_author(collection, SAMPLE_AUTHOR),
    )
    _dump(
        out,
        f'4) Update price of "{SAMPLE_UPDATE_TITLE}" to {SAMPLE_UPDATE_PRICE}:',
        BookCRUD.update_price_by_title(collection, SAMPLE_UPDATE_TITLE, SAMPLE_UPDATE_PRICE),
    )
    _dump(
        out,
        f'5) Delete book "{SAMPLE_DELETE_TITLE}" (deletedCount):',
        BookCRUD.delete_by_title(collection, SAMPLE_DELETE_TITLE),
    )

    _section(out, "Advanced Queries")
    _dump(
        out,
        f"1) Books in stock and published after {IN_STOCK_AFTER_YEAR} (title, author, price):",
        BookCRUD.find_in_stock_published_after(collection, IN_STOCK_AFTER_YEAR),
    )
    _dump(
        out,
        "2) Projection of all books (title, author, price):",
        BookCRUD.list_all(collection),
    )
    _dump(out, "3) Sorted by price ascending:", BookCRUD.sort_by_price(collection))
    _dump(
        out,
        "4) Sorted by price descending:",
        BookCRUD.sort_by_price(collection, descending=True),
    )
    for page in (1, 2):
        _dump(
            out,
            f"5) Page {page} (page size = {DEFAULT_PAGE_SIZE}):",
            BookCRUD.get_page(collection, page),
        )

    _section(out, "Aggregation Pipelines")
    _dump(
        out,
        "1) Average price of books by genre:",
        aggregations.average_price_by_genre(collection),
    )
    _dump(out, "2) Author with the most books:", aggregations.top_author(collection))
    _dump(
        out,
        "3) Books grouped by publication decade:",
        aggregations.books_by_decade(collection),
    )

    _section(out, "Indexing")
    comparison = indexing.compare_title_lookup(collection)
    _dump(out, "Explain for title query BEFORE creating indexes:", comparison.before)
    _dump(out, "Created indexes:", comparison.created_indexes)
    _dump(out, "Explain for title query AFTER creating indexes:", comparison.after)
    _dump(out, "Explain for author + published_year query:", comparison.compound)

    print("\n--- All tasks completed ---\n", file=out)
