# services/catalog_store.py
# One MongoDB connection per process, opened before the app serves requests.

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from services import config

logger = logging.getLogger(__name__)

# Field names as stored in the catalog collection
BRAND_FIELD = "Marca"
MODEL_FIELD = "Modelo"
VERSION_FIELD = "Submodelo"


class StoreUnavailable(RuntimeError):
    """Raised when the catalog store cannot be reached at startup."""


@dataclass
class CatalogStore:
    collection: Collection
    client: Optional[Any] = None
    max_time_ms: int = config.MONGODB_TIMEOUT_MS

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


def connect_store(
    uri: str = config.MONGODB_URI,
    database: str = config.MONGODB_DATABASE,
    collection: str = config.MONGODB_COLLECTION,
    timeout_ms: int = config.MONGODB_TIMEOUT_MS,
) -> CatalogStore:
    """
    Open the client and ping the server. MongoClient connects lazily,
    so without the ping a bad URI would only surface on the first request.
    """
    client = None
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        client.admin.command("ping")
    except PyMongoError as e:
        if client is not None:
            client.close()
        logger.error("Could not connect to MongoDB: %s", e)
        raise StoreUnavailable(f"MongoDB unreachable: {e}") from e

    logger.info("Connected to MongoDB (db=%s, collection=%s)", database, collection)
    return CatalogStore(
        collection=client[database][collection],
        client=client,
        max_time_ms=timeout_ms,
    )
