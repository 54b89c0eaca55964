from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pymongo.errors import PyMongoError

# Add project root to path for direct script execution.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bookstore.db import MongoConfig, get_books_collection, load_env_file, mongo_client
from bookstore.report import run_query_battery

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Run the catalog query battery: CRUD, advanced queries, aggregation "
            "pipelines and index explain comparisons."
        )
    )
    parser.add_argument("--uri", default=None, help="MongoDB URI (overrides MONGODB_URI).")
    parser.add_argument("--db", default=None, help="Database name (overrides MONGODB_DB).")
    parser.add_argument(
        "--collection",
        default=None,
        help="Collection name (overrides MONGODB_COLLECTION).",
    )
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> MongoConfig:
    return MongoConfig.from_env().with_overrides(
        uri=args.uri, db_name=args.db, collection=args.collection
    )


def main() -> int:
    load_env_file()
    args = parse_args()

    try:
        config = build_config(args)
        with mongo_client(config) as client:
            logger.info("Running queries against %s", config.namespace)
            run_query_battery(get_books_collection(client, config))
    except (ConnectionError, PyMongoError, ValueError):
        logger.exception("Error during query run")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
