"""
Counter model for the counters collection.
"""
from pydantic import BaseModel, Field


class Sequences:
    """Well-known sequence names."""
    AGENT = "agent"
    CLIENT = "client"
    NOTIFICATION = "notification"


class Counter(BaseModel):
    """
    Counter document model, one per named sequence.
    """
    name: str = Field(..., alias="_id", description="Sequence name")
    value: int = Field(..., ge=1, description="Last issued value")

    class Config:
        populate_by_name = True
