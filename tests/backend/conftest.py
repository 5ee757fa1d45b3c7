"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with connection managers,
services and FastAPI test clients wired to mock databases.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Connection Manager Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def connected_manager(test_settings, client_factory):
    """ConnectionManager that completed its startup connection."""
    from notification_service.database.connections import ConnectionManager

    manager = ConnectionManager(test_settings, client_factory=client_factory)
    await manager.initialize()
    yield manager
    await manager.close()


@pytest_asyncio.fixture
async def unready_manager(test_settings, unreachable_client_factory):
    """ConnectionManager whose startup connection failed."""
    from notification_service.core.exceptions import ConnectError
    from notification_service.database.connections import ConnectionManager

    manager = ConnectionManager(test_settings, client_factory=unreachable_client_factory)
    with pytest.raises(ConnectError):
        await manager.initialize()
    yield manager


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def allocator(connected_manager):
    """SequenceAllocator on the connected manager."""
    from notification_service.services.sequence_service import SequenceAllocator

    return SequenceAllocator(connected_manager)


@pytest.fixture
def repository(connected_manager, allocator):
    """NotificationRepository on the connected manager."""
    from notification_service.services.notification_repository import NotificationRepository

    return NotificationRepository(connected_manager, allocator)


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, client_factory):
    """
    FastAPI app whose lifespan connects to the mongomock-backed double.
    """
    from notification_service.database.connections import ConnectionManager
    from notification_service.main import create_app

    manager = ConnectionManager(test_settings, client_factory=client_factory)
    return create_app(manager, test_settings)


@pytest.fixture
def client(app):
    """TestClient for the connected app (runs the lifespan)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def unready_app(test_settings, unreachable_client_factory):
    """FastAPI app whose startup connection fails."""
    from notification_service.database.connections import ConnectionManager
    from notification_service.main import create_app

    manager = ConnectionManager(test_settings, client_factory=unreachable_client_factory)
    return create_app(manager, test_settings)


@pytest.fixture
def unready_client(unready_app):
    """TestClient for the app that could not connect to MongoDB."""
    with TestClient(unready_app) as c:
        yield c


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the RC/error envelope."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["RC"] == 2
        assert "error" in data
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert
