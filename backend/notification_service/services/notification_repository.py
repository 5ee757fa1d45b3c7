"""
Notification repository for the notification collection.
"""
import asyncio
import inspect
import logging
from collections.abc import Mapping
from typing import AsyncIterator, Optional

from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, OperationFailure, PyMongoError

from notification_service.core.exceptions import (
    DuplicateRecordError,
    InvalidFilterError,
    StoreError,
)
from notification_service.database.connections import ConnectionManager
from notification_service.models.counter import Sequences
from notification_service.models.notification import Notification
from notification_service.services.sequence_service import SequenceAllocator

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Insert, query and reset operations on stored notifications."""

    def __init__(
        self,
        connections: ConnectionManager,
        allocator: Optional[SequenceAllocator] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize with the connection manager and an optional allocator."""
        self.connections = connections
        self.timeout = timeout or connections.settings.store_timeout_seconds
        self.allocator = allocator or SequenceAllocator(connections, self.timeout)

    async def create(self, agent_id: str, client_id: str) -> Notification:
        """
        Record a notification between an agent and a client.

        Allocates the id from the notification sequence, then inserts.

        Raises:
            NotReadyError: If the store is not connected
            AllocationError: If no id could be allocated
            StoreError: If the insert failed
        """
        record_id = await self.allocator.next_id(Sequences.NOTIFICATION)
        record = Notification.new(record_id, agent_id, client_id)
        await self.insert(record)
        logger.info(f"Notification {record.id} recorded: agent={agent_id} client={client_id}")
        return record

    async def insert(self, record: Notification) -> None:
        """
        Insert one record whose id was already allocated.

        Raises:
            NotReadyError: If the store is not connected
            DuplicateRecordError: If a record with the same id exists
            StoreError: On any other store failure or timeout
        """
        notifications = self.connections.notifications_collection()
        try:
            await asyncio.wait_for(
                notifications.insert_one(record.to_document()),
                timeout=self.timeout,
            )
        except DuplicateKeyError as e:
            raise DuplicateRecordError(record.id) from e
        except asyncio.TimeoutError as e:
            raise StoreError(f"Timed out inserting notification {record.id}") from e
        except PyMongoError as e:
            raise StoreError(f"Failed to add record to Notification collection: {e}") from e

    def find(self, query: Optional[Mapping] = None) -> AsyncIterator[Notification]:
        """
        Stream records matching a MongoDB filter; None or {} matches all.

        Readiness and the query are checked before anything is sent to the
        store. Documents are fetched lazily while iterating.

        Raises:
            NotReadyError: If the store is not connected
            InvalidFilterError: If query is not a mapping, or (while iterating)
                if the store rejects the filter
        """
        notifications = self.connections.notifications_collection()
        if query is None:
            query = {}
        if not isinstance(query, Mapping):
            raise InvalidFilterError(
                f"Query filter must be a JSON object, got {type(query).__name__}"
            )
        return self._stream(notifications.find(dict(query)))

    async def find_all(self, query: Optional[Mapping] = None) -> list[Notification]:
        """Collect every record matching query into a list."""
        return [record async for record in self.find(query)]

    async def delete_all(self) -> int:
        """
        Remove every record from the collection.

        Returns:
            Number of records removed (0 when already empty)
        """
        notifications = self.connections.notifications_collection()
        try:
            result = await asyncio.wait_for(
                notifications.delete_many({}),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise StoreError("Timed out emptying the Notification collection") from e
        except PyMongoError as e:
            raise StoreError(f"Failed to empty the Notification collection: {e}") from e

        logger.info(f"Notification collection reset, {result.deleted_count} records removed")
        return result.deleted_count

    async def _stream(self, cursor) -> AsyncIterator[Notification]:
        try:
            while True:
                try:
                    document = await asyncio.wait_for(cursor.__anext__(), timeout=self.timeout)
                except StopAsyncIteration:
                    return
                except asyncio.TimeoutError as e:
                    raise StoreError("Timed out reading from the Notification collection") from e
                except OperationFailure as e:
                    # The server rejected the filter itself (unknown operator, bad value)
                    raise InvalidFilterError(f"Invalid query filter: {e}") from e
                except PyMongoError as e:
                    raise StoreError(f"Failed to query the Notification collection: {e}") from e

                try:
                    record = Notification.from_document(document)
                except ValidationError as e:
                    raise StoreError(f"Malformed notification record {document.get('_id')!r}") from e
                yield record
        finally:
            closing = cursor.close()
            if inspect.isawaitable(closing):
                await closing
