"""
Global test fixtures for the DreamHome Notification service.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Motor client doubles for connection lifecycle tests
- Test settings
- Notification record factories
"""

import sys
from pathlib import Path
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings pointing at a throwaway database with short timeouts."""
    from notification_service.config import Settings

    return Settings(
        mongo_uri="mongodb://test:27017",
        db_name="dreamhome_test",
        server_selection_timeout_ms=100,
        store_timeout_seconds=1.0,
        log_level="DEBUG",
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


def make_motor_client(
    backing_client: Optional[AsyncMongoMockClient] = None,
    ping_error: Optional[BaseException] = None,
) -> MagicMock:
    """
    Build a motor client double.

    Args:
        backing_client: mongomock-motor client serving database lookups;
            when omitted, lookups return plain MagicMocks
        ping_error: exception raised by the startup ping

    Returns:
        MagicMock standing in for AsyncIOMotorClient
    """
    client = MagicMock(name="motor_client")
    if ping_error is not None:
        client.admin.command = AsyncMock(side_effect=ping_error)
    else:
        client.admin.command = AsyncMock(return_value={"ok": 1.0})
    if backing_client is not None:
        client.__getitem__.side_effect = lambda name: backing_client[name]
    return client


@pytest.fixture
def motor_client(mock_async_mongo_client):
    """Reachable motor client double backed by mongomock-motor."""
    return make_motor_client(mock_async_mongo_client)


@pytest.fixture
def unreachable_motor_client():
    """Motor client double whose ping fails as if the server were down."""
    return make_motor_client(
        ping_error=ServerSelectionTimeoutError("mongodb:27017: [Errno 111] Connection refused")
    )


@pytest.fixture
def client_factory(motor_client):
    """Client factory returning the reachable double; records its calls."""
    return MagicMock(name="client_factory", return_value=motor_client)


@pytest.fixture
def unreachable_client_factory(unreachable_motor_client):
    """Client factory returning the unreachable double."""
    return MagicMock(name="client_factory", return_value=unreachable_motor_client)


# =============================================================================
# Notification Fixtures
# =============================================================================

@pytest.fixture
def notification_document() -> dict:
    """A notification document as stored in MongoDB."""
    return {
        "_id": "1001",
        "notificationId": "1001",
        "agentId": "agent1001",
        "clientId": "client1003",
    }


@pytest.fixture
def notification(notification_document):
    """The same notification as a model instance."""
    from notification_service.models.notification import Notification

    return Notification.from_document(notification_document)
