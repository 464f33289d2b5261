"""Pydantic schemas for recognition endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecognitionCreate(BaseModel):
    """Request body for creating a recognition."""

    sender_id: int
    recipient_id: int
    amount: int = Field(
        ...,
        gt=0,
        strict=True,
        description="Credits to transfer to the recipient.",
    )
    message: Optional[str] = Field(None, max_length=280)


class RecognitionRead(BaseModel):
    """Recognition response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: int
    recipient_id: int
    amount: int
    message: Optional[str]
    created_at: datetime
