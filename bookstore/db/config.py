"""Configuration for the MongoDB connection."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_URI = "mongodb://localhost:27017"
DEFAULT_DB_NAME = "plp_bookstore"
DEFAULT_COLLECTION = "books"

_VALID_SCHEMES = ("mongodb://", "mongodb+srv://")


def load_env_file() -> None:
    """Load the nearest ``.env`` file into the process environment.

    Searches ``<repo_root>/.env`` first, then falls back to the current
    working directory. Existing environment variables are never overridden.
    """
    repo_root = Path(__file__).resolve().parents[2]
    candidate = repo_root / ".env"
    if candidate.exists():
        load_dotenv(candidate)
    else:
        load_dotenv()


@dataclass
class MongoConfig:
    """Configuration for the MongoDB connection.

    Attributes:
        uri: Connection string of the MongoDB deployment
        db_name: Database holding the catalog
        collection: Collection holding the book records
        timeout_ms: Server selection timeout in milliseconds
    """

    uri: str = DEFAULT_URI
    db_name: str = DEFAULT_DB_NAME
    collection: str = DEFAULT_COLLECTION
    timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> "MongoConfig":
        """Load configuration from environment variables.

        Environment variables:
            MONGODB_URI: Connection string
            MONGODB_DB: Database name
            MONGODB_COLLECTION: Collection name
            MONGODB_TIMEOUT_MS: Server selection timeout in milliseconds

        Returns:
            MongoConfig instance
        """
        return cls(
            uri=os.getenv("MONGODB_URI", DEFAULT_URI).strip(),
            db_name=os.getenv("MONGODB_DB", DEFAULT_DB_NAME).strip(),
            collection=os.getenv("MONGODB_COLLECTION", DEFAULT_COLLECTION).strip(),
            timeout_ms=int(os.getenv("MONGODB_TIMEOUT_MS", "5000")),
        )

    def validate(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.uri.startswith(_VALID_SCHEMES):
            raise ValueError(
                f"Invalid MONGODB_URI: {self.uri!r}. Must start with "
                "'mongodb://' or 'mongodb+srv://'"
            )

        if not self.db_name:
            raise ValueError("Database name is required")

        if not self.collection:
            raise ValueError("Collection name is required")

        if self.timeout_ms <= 0:
            raise ValueError(f"Timeout must be > 0. Got: {self.timeout_ms}")

    def with_overrides(
        self,
        uri: Optional[str] = None,
        db_name: Optional[str] = None,
        collection: Optional[str] = None,
    ) -> "MongoConfig":
        """Return a copy with every non-None argument replacing its field."""
        overrides = {"uri": uri, "db_name": db_name, "collection": collection}
        return replace(
            self, **{key: value for key, value in overrides.items() if value is not None}
        )

    @property
    def namespace(self) -> str:
        return f"{self.db_name}.{self.collection}"
