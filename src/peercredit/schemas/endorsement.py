"""Pydantic schemas for endorsement endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EndorsementCreate(BaseModel):
    """Request payload to endorse a recognition."""

    user_id: int


class EndorsementRead(BaseModel):
    """Response payload representing an endorsement."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    recognition_id: int
    created_at: datetime
