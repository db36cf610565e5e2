"""
Document store bootstrap: open the client and make sure the collection exists.

Both steps run once, before the app serves anything. Failures raise
``StartupError``; there is nothing useful to serve without the store.
"""
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .errors import StartupError

logger = logging.getLogger(__name__)


def connect(uri: str, timeout_ms: int = 10000) -> MongoClient:
    client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms, connectTimeoutMS=timeout_ms)
    try:
        # MongoClient connects lazily; ping forces a round trip.
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StartupError(f"Cannot connect to document store: {e}") from e
    logger.info("Connected to document store")
    return client


def ensure_collection(client: MongoClient, db_name: str, collection_name: str) -> Collection:
    """Create ``collection_name`` in ``db_name`` if it does not exist yet."""
    db = client[db_name]
    try:
        names = db.list_collection_names()
        if collection_name not in names:
            db.create_collection(collection_name)
            logger.info("Created collection %s.%s", db_name, collection_name)
    except PyMongoError as e:
        raise StartupError(f"Cannot prepare collection {db_name}.{collection_name}: {e}") from e
    return db[collection_name]
