"""Scoped MongoDB client management."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import MongoConfig

logger = logging.getLogger(__name__)


@contextmanager
def mongo_client(config: Optional[MongoConfig] = None) -> Iterator[MongoClient]:
    """Open a MongoDB client for the duration of a ``with`` block.

    The client is probed once before it is handed out and is always closed
    on exit, whether the block finishes normally or raises.

    Args:
        config: MongoDB configuration. If None, loads from environment.

    Yields:
        Connected MongoClient

    Raises:
        ConnectionError: If the deployment cannot be reached
        ValueError: If configuration is invalid
    """
    if config is None:
        config = MongoConfig.from_env()

    config.validate()

    client = _create_client(config)
    try:
        _validate_connection(client, config)
        logger.info("Connected to MongoDB: %s", config.uri)
        yield client
    finally:
        client.close()
        logger.info("Connection closed.")


def get_books_collection(client: MongoClient, config: MongoConfig) -> Collection:
    """Return the catalog collection named by ``config``."""
    return client[config.db_name][config.collection]


def _create_client(config: MongoConfig) -> MongoClient:
    # MongoClient connects lazily; the ping in _validate_connection forces it.
    return MongoClient(config.uri, serverSelectionTimeoutMS=config.timeout_ms)


def _validate_connection(client: MongoClient, config: MongoConfig) -> None:
    """Validate MongoDB connection."""
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        raise ConnectionError(
            f"Failed to connect to MongoDB at {config.uri}: {str(e)}"
        ) from e
