"""Index creation and explain helpers for the book catalog."""

import logging
from typing import Any, Dict, List

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from .schemas import ExplainSummary, IndexComparison

logger = logging.getLogger(__name__)

TITLE_INDEX_NAME = "idx_title_1"
AUTHOR_YEAR_INDEX_NAME = "idx_author_publishedYear"

TITLE_INDEX = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX = [("author", ASCENDING), ("published_year", DESCENDING)]

EXPLAIN_VERBOSITY = "executionStats"

SAMPLE_TITLE = "Echoes of Tomorrow"
SAMPLE_AUTHOR = "Samuel Reed"
SAMPLE_MIN_YEAR = 2000


def create_indexes(collection: Collection) -> List[str]:
    """Create the title index and the author/published_year compound index.

    Returns:
        Names of the created indexes, in creation order
    """
    names = []
    logger.info("Creating index %s on %s", TITLE_INDEX_NAME, TITLE_INDEX)
    names.append(collection.create_index(TITLE_INDEX, name=TITLE_INDEX_NAME))
    logger.info("Creating index %s on %s", AUTHOR_YEAR_INDEX_NAME, AUTHOR_YEAR_INDEX)
    names.append(collection.create_index(AUTHOR_YEAR_INDEX, name=AUTHOR_YEAR_INDEX_NAME))
    return names


def explain_query(collection: Collection, query: Dict[str, Any]) -> ExplainSummary:
    """Explain a find on ``collection`` and summarize the server's statistics."""
    output = collection.database.command(
        "explain",
        {"find": collection.name, "filter": query},
        verbosity=EXPLAIN_VERBOSITY,
    )
    return summarize_explain(output)


def summarize_explain(output: Dict[str, Any]) -> ExplainSummary:
    """Extract execution statistics and the winning plan from explain output."""
    stats = output.get("executionStats") or {}
    planner = output.get("queryPlanner") or {}
    return ExplainSummary(
        total_docs_examined=stats.get("totalDocsExamined"),
        total_keys_examined=stats.get("totalKeysExamined"),
        execution_time_millis=stats.get("executionTimeMillis"),
        winning_plan=planner.get("winningPlan"),
    )


def compare_title_lookup(
    collection: Collection,
    title: str = SAMPLE_TITLE,
    author: str = SAMPLE_AUTHOR,
    min_year: int = SAMPLE_MIN_YEAR,
) -> IndexComparison:
    """Explain a title lookup before and after indexing, plus a compound query.

    The title query is explained once without the new indexes, the indexes
    are created, then the same query and an author/year range query are
    explained again.
    """
    title_query = {"title": title}
    before = explain_query(collection, title_query)
    created = create_indexes(collection)
    after = explain_query(collection, title_query)
    compound = explain_query(
        collection, {"author": author, "published_year": {"$gte": min_year}}
    )
    return IndexComparison(
        before=before,
        created_indexes=created,
        after=after,
        compound=compound,
    )
