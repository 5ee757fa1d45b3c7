"""
Error taxonomy for the notification core.

Every failure path in the core raises one of these; the HTTP layer is the
only place they are turned into responses.
"""
from fastapi import status


class NotificationServiceError(Exception):
    """Base class for all notification service errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConnectError(NotificationServiceError):
    """The initial connection to MongoDB failed. Non-fatal to the process."""


class NotReadyError(NotificationServiceError):
    """A data operation was attempted while the store is not connected."""

    def __init__(self, message: str = "ERROR: we are not connected to the DB!"):
        super().__init__(message)


class AllocationError(NotificationServiceError):
    """The atomic counter increment failed or timed out."""


class StoreError(NotificationServiceError):
    """An insert, find or delete failed for a reason other than readiness."""


class InvalidFilterError(StoreError):
    """The query filter is not a usable MongoDB filter document."""

    http_status = status.HTTP_400_BAD_REQUEST


class MissingParameterError(NotificationServiceError):
    """A required request parameter was not supplied."""

    http_status = status.HTTP_400_BAD_REQUEST


class DuplicateRecordError(StoreError):
    """A record with the same primary key already exists."""

    def __init__(self, record_id: str):
        super().__init__(f"duplicate notification id: {record_id}")
        self.record_id = record_id
