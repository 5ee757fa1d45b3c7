"""
Notification model for the notification collection.
"""
from pydantic import BaseModel, Field, model_validator


class Notification(BaseModel):
    """
    Notification document model for MongoDB notification collection.

    Records are immutable once created; `notificationId` always mirrors `_id`.
    """
    id: str = Field(..., alias="_id", min_length=1, description="Allocated id, also the primary key")
    notification_id: str = Field(..., alias="notificationId", description="Same value as id")
    agent_id: str = Field(..., alias="agentId", description="Agent being notified")
    client_id: str = Field(..., alias="clientId", description="Client the notification is about")

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def check_notification_id(self) -> "Notification":
        if self.notification_id != self.id:
            raise ValueError("notificationId must equal the record id")
        return self

    @classmethod
    def new(cls, record_id: str, agent_id: str, client_id: str) -> "Notification":
        """Build a record for a freshly allocated id."""
        return cls(
            id=record_id,
            notification_id=record_id,
            agent_id=agent_id,
            client_id=client_id,
        )

    @classmethod
    def from_document(cls, document: dict) -> "Notification":
        return cls.model_validate(document)

    def to_document(self) -> dict:
        """Document as stored in MongoDB (and returned by /search)."""
        return self.model_dump(by_alias=True)
