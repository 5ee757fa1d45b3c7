"""
Service layer for id allocation and notification storage.
"""
from notification_service.services.sequence_service import SequenceAllocator
from notification_service.services.notification_repository import NotificationRepository

__all__ = [
    "SequenceAllocator",
    "NotificationRepository",
]
