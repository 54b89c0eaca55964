import logging
from typing import Iterable, Optional

from pymongo.collection import Collection

from bookstore.db.client import get_books_collection, mongo_client
from bookstore.db.config import MongoConfig, load_env_file
from bookstore.db.crud import BookCRUD
from bookstore.db.fixtures import SAMPLE_BOOKS
from bookstore.db.schemas import Book, InsertSummary

logger = logging.getLogger(__name__)


def seed(
    collection: Collection,
    books: Optional[Iterable[Book]] = None,
    drop_existing: bool = False,
) -> InsertSummary:
    """Insert the sample catalog into ``collection`` as one ordered batch.

    Re-running without ``drop_existing`` inserts a second copy of every book.
    """
    if drop_existing:
        logger.info("Dropping collection %s before seeding", collection.full_name)
        collection.drop()

    inserted = BookCRUD.insert_many(collection, SAMPLE_BOOKS if books is None else books)
    logger.info("Inserted %d documents into %s", inserted, collection.full_name)
    return InsertSummary(inserted_count=inserted, namespace=collection.full_name)


def seed_from_config(
    config: Optional[MongoConfig] = None, drop_existing: bool = False
) -> InsertSummary:
    if config is None:
        config = MongoConfig.from_env()
    with mongo_client(config) as client:
        return seed(get_books_collection(client, config), drop_existing=drop_existing)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    load_env_file()
    seed_from_config()
