"""
Core module - error taxonomy shared by the store layer and the routers.
"""
from notification_service.core.exceptions import (
    NotificationServiceError,
    ConnectError,
    NotReadyError,
    AllocationError,
    StoreError,
    InvalidFilterError,
    MissingParameterError,
    DuplicateRecordError,
)

__all__ = [
    "NotificationServiceError",
    "ConnectError",
    "NotReadyError",
    "AllocationError",
    "StoreError",
    "InvalidFilterError",
    "MissingParameterError",
    "DuplicateRecordError",
]
