"""
Store dependencies for route handlers.
"""
from typing import Annotated

from fastapi import Depends, Request

from notification_service.database.connections import ConnectionManager
from notification_service.services.notification_repository import NotificationRepository
from notification_service.services.sequence_service import SequenceAllocator


def get_connection_manager(request: Request) -> ConnectionManager:
    """Dependency to get the application's ConnectionManager."""
    return request.app.state.connections


def get_sequence_allocator(
    connections: Annotated[ConnectionManager, Depends(get_connection_manager)],
) -> SequenceAllocator:
    """Dependency to get a SequenceAllocator bound to the app's connection."""
    return SequenceAllocator(connections)


def get_notification_repository(
    connections: Annotated[ConnectionManager, Depends(get_connection_manager)],
    allocator: Annotated[SequenceAllocator, Depends(get_sequence_allocator)],
) -> NotificationRepository:
    """Dependency to get a NotificationRepository bound to the app's connection."""
    return NotificationRepository(connections, allocator)
