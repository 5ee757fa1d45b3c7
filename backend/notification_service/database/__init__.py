"""
Database module - MongoDB connection lifecycle and collection definitions.
"""
from notification_service.database.connections import ConnectionManager
from notification_service.database.notification_db import Collections, create_indexes

__all__ = [
    "ConnectionManager",
    "Collections",
    "create_indexes",
]
