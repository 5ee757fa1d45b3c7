"""
Response envelopes returned by the HTTP endpoints.

Every body carries an `RC` return code; failures add an `error` message.
"""
from enum import IntEnum

from pydantic import BaseModel, Field


class ReturnCode(IntEnum):
    """Return codes used in the `RC` field."""
    OK = 0
    WARNING = 1
    ERROR = 2
    UNKNOWN = 99


class StatusResponse(BaseModel):
    """Successful response with a human readable message."""
    rc: ReturnCode = Field(ReturnCode.OK, alias="RC", description="Return code")
    success: str = Field(..., description="Outcome message")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error response."""
    rc: ReturnCode = Field(ReturnCode.ERROR, alias="RC", description="Return code")
    error: str = Field(..., description="Error message")

    class Config:
        populate_by_name = True


class NotifyResponse(StatusResponse):
    """Result of recording a notification."""
    notification_id: str = Field(..., alias="notificationId", description="Allocated notification id")


class ResetResponse(StatusResponse):
    """Result of emptying the notification collection."""
    deleted: int = Field(..., ge=0, description="Number of records removed")


class DbConnectedResponse(StatusResponse):
    """Store connectivity report."""
    collections: list[str] = Field(default_factory=list, description="Collections in the database")


class SequenceResponse(StatusResponse):
    """Result of allocating from a sequence."""
    sequence: str = Field(..., description="Sequence name")
    id: str = Field(..., description="Allocated id")
