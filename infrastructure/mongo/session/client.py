import logging
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

_client: MongoClient[Any] | None = None


def get_client(mongo_uri: str) -> MongoClient[Any]:
    """
    Obtains the MongoDB client (Singleton).

    The client connects lazily; use `ping` to verify the server is reachable.
    """
    global _client
    if _client is None:
        _client = MongoClient(mongo_uri)
    return _client


def get_db(mongo_uri: str, db_name: str) -> Database[Any]:
    """
    Obtains the MongoDB database.

    Args:
        mongo_uri: Connection string.
        db_name: Name of the database holding the tasks collection.

    Returns:
        Database: The MongoDB database instance.
    """
    return get_client(mongo_uri)[db_name]


def ping(db: Database[Any]) -> None:
    """Raises a `pymongo.errors.PyMongoError` when the server does not answer."""
    db.client.admin.command("ping")
