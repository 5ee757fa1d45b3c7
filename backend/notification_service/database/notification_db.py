"""
Notification database configuration.
Stores sequence counters and notification records.

Structure:
- counters: one document per named sequence, {"_id": name, "value": last}
- notification: notification records keyed by their allocated id
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class Collections:
    """Collection names in the notification database."""
    COUNTERS = "counters"
    NOTIFICATIONS = "notification"

    # Index definitions for each collection
    INDEXES = {
        "notification": [
            {"keys": [("agentId", 1)]},
            {"keys": [("clientId", 1)]},
        ],
    }


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create lookup indexes for the search filters."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except PyMongoError as e:
                # Index might already exist with different options
                logger.debug(f"Index exists or error on {collection_name}: {e}")
