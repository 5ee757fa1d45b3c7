"""
Sequence service for minting unique ids from named counters.
"""
import asyncio
import logging
from typing import Optional

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from notification_service.core.exceptions import AllocationError
from notification_service.database.connections import ConnectionManager
from notification_service.models.counter import Counter

logger = logging.getLogger(__name__)


class SequenceAllocator:
    """
    Allocates strictly increasing ids per sequence name.

    Each allocation is one atomic $inc upsert on the counter document, so
    concurrent callers (in this process or any other sharing the database)
    never observe the same value for the same name.
    """

    def __init__(self, connections: ConnectionManager, timeout: Optional[float] = None):
        """Initialize with the connection manager and a per-call timeout."""
        self.connections = connections
        self.timeout = timeout or connections.settings.store_timeout_seconds

    async def next_value(self, sequence_name: str) -> int:
        """
        Increment the named counter and return its new value.

        The counter is created with value 1 on first use.

        Raises:
            NotReadyError: If the store is not connected
            ValueError: If sequence_name is empty
            AllocationError: If the atomic update fails or times out
        """
        counters = self.connections.counters_collection()
        if not sequence_name:
            raise ValueError("Sequence name must not be empty")

        try:
            document = await asyncio.wait_for(
                counters.find_one_and_update(
                    {"_id": sequence_name},
                    {"$inc": {"value": 1}},
                    upsert=True,
                    return_document=ReturnDocument.AFTER,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise AllocationError(
                f"Timed out allocating from sequence '{sequence_name}'"
            ) from e
        except PyMongoError as e:
            raise AllocationError(
                f"Failed to allocate from sequence '{sequence_name}': {e}"
            ) from e

        if document is None:
            raise AllocationError(f"Counter '{sequence_name}' was not returned by the store")

        return Counter.model_validate(document).value

    async def next_id(self, sequence_name: str) -> str:
        """Allocate the next id of a sequence as a decimal string."""
        value = await self.next_value(sequence_name)
        logger.debug(f"Allocated {sequence_name} id {value}")
        return str(value)

    async def reset(self, sequence_name: str) -> bool:
        """
        Remove one counter so the sequence restarts at 1.

        Returns:
            True if a counter existed and was removed
        """
        counters = self.connections.counters_collection()
        try:
            result = await asyncio.wait_for(
                counters.delete_one({"_id": sequence_name}),
                timeout=self.timeout,
            )
        except (PyMongoError, asyncio.TimeoutError) as e:
            raise AllocationError(f"Failed to reset sequence '{sequence_name}': {e!r}") from e

        logger.info(f"Sequence '{sequence_name}' reset")
        return result.deleted_count > 0

    async def drop_all(self) -> None:
        """Drop the counters collection; every sequence restarts at 1."""
        counters = self.connections.counters_collection()
        try:
            await asyncio.wait_for(counters.drop(), timeout=self.timeout)
        except (PyMongoError, asyncio.TimeoutError) as e:
            raise AllocationError(f"Failed to drop counters collection: {e!r}") from e

        logger.warning("Counters collection dropped")
