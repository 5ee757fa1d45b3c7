"""
Pydantic models for database documents.
"""
from notification_service.models.counter import Counter, Sequences
from notification_service.models.notification import Notification

__all__ = [
    "Counter",
    "Sequences",
    "Notification",
]
