"""
MongoDB connection lifecycle management.

A single ConnectionManager owns the motor client and the collection handles.
It makes exactly one connection attempt; when that attempt fails the service
keeps running and every data operation reports NotReadyError.
"""
import asyncio
import logging
from typing import Callable, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from notification_service.config import Settings, get_settings
from notification_service.core.exceptions import ConnectError, NotReadyError, StoreError
from notification_service.database.notification_db import Collections

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., AsyncIOMotorClient]


class ConnectionManager:
    """Owns the store connection, its readiness flag and collection handles."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: ClientFactory = AsyncIOMotorClient,
    ):
        self.settings = settings or get_settings()
        self._client_factory = client_factory
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None
        self._counters: Optional[AsyncIOMotorCollection] = None
        self._notifications: Optional[AsyncIOMotorCollection] = None
        self._ready = False
        self._attempted = False

    @property
    def is_ready(self) -> bool:
        """Whether the initial connection succeeded and handles are valid."""
        return self._ready

    @property
    def attempted(self) -> bool:
        """Whether initialize() has already been called."""
        return self._attempted

    async def initialize(self, target: Optional[str] = None) -> bool:
        """
        Connect to MongoDB and store the collection handles.

        Args:
            target: MongoDB connection string (defaults to settings.mongo_uri)

        Returns:
            True once the store is connected and ready

        Raises:
            ConnectError: If the ping fails or times out, or if a connection
                attempt was already made by this manager
        """
        if self._attempted:
            raise ConnectError("Connection already attempted, reconnecting is not supported")
        self._attempted = True

        target = target or self.settings.mongo_uri
        client = None
        try:
            client = self._client_factory(
                target,
                serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms,
            )
            await asyncio.wait_for(
                client.admin.command("ping"),
                timeout=self.settings.store_timeout_seconds,
            )
        except (PyMongoError, asyncio.TimeoutError) as e:
            if client is not None:
                client.close()
            raise ConnectError(f"Failed to connect to MongoDB: {e!r}") from e

        self._client = client
        self._db = client[self.settings.db_name]
        self._counters = self._db[Collections.COUNTERS]
        self._notifications = self._db[Collections.NOTIFICATIONS]
        self._ready = True

        logger.info(f"Connected to MongoDB database '{self.settings.db_name}'")
        return True

    def database(self) -> AsyncIOMotorDatabase:
        """Get the database handle."""
        self._require_ready()
        return self._db

    def counters_collection(self) -> AsyncIOMotorCollection:
        """Get the counters collection handle."""
        self._require_ready()
        return self._counters

    def notifications_collection(self) -> AsyncIOMotorCollection:
        """Get the notifications collection handle."""
        self._require_ready()
        return self._notifications

    async def list_collections(self) -> list[str]:
        """List the collection names in the database."""
        db = self.database()
        try:
            names = await asyncio.wait_for(
                db.list_collection_names(),
                timeout=self.settings.store_timeout_seconds,
            )
        except (PyMongoError, asyncio.TimeoutError) as e:
            raise StoreError(f"Failed to list collections: {e!r}") from e
        return sorted(names)

    async def close(self) -> None:
        """Close the client. The manager never reconnects afterwards."""
        if self._client is not None:
            self._client.close()
        self._client = None
        self._db = None
        self._counters = None
        self._notifications = None
        self._ready = False

    def _require_ready(self) -> None:
        if not self._ready:
            raise NotReadyError()
