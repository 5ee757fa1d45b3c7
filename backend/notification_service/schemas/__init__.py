"""
Request and response schemas for API endpoints.
"""
from notification_service.schemas.responses import (
    ReturnCode,
    StatusResponse,
    ErrorResponse,
    NotifyResponse,
    ResetResponse,
    DbConnectedResponse,
    SequenceResponse,
)

__all__ = [
    "ReturnCode",
    "StatusResponse",
    "ErrorResponse",
    "NotifyResponse",
    "ResetResponse",
    "DbConnectedResponse",
    "SequenceResponse",
]
