"""
API Routers module.
"""
from notification_service.routers import health, notifications, sequences

__all__ = ["health", "notifications", "sequences"]
