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

from bookstore.db import MongoConfig, load_env_file
from bookstore.seed import seed_from_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Insert the sample book catalog into MongoDB in one ordered batch."
    )
    parser.add_argument("--uri", default=None, help="MongoDB URI (overrides MONGODB_URI).")
    parser.add_argument("--db", default=None, help="Database name (overrides MONGODB_DB).")
    parser.add_argument(
        "--collection",
        default=None,
        help="Collection name (overrides MONGODB_COLLECTION).",
    )
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop the collection before inserting so re-runs do not duplicate books.",
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
        summary = seed_from_config(config, drop_existing=args.drop)
    except (ConnectionError, PyMongoError, ValueError):
        logger.exception("Error inserting books")
        return 1

    print(f"Inserted {summary.inserted_count} documents into {summary.namespace}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
