"""
Dependencies for dependency injection in routes.
"""
from notification_service.dependencies.store import (
    get_connection_manager,
    get_sequence_allocator,
    get_notification_repository,
)

__all__ = [
    "get_connection_manager",
    "get_sequence_allocator",
    "get_notification_repository",
]
