"""Leaderboard response schemas."""

from pydantic import BaseModel, Field


class LeaderboardEntry(BaseModel):
    """Aggregated leaderboard entry."""

    id: int
    name: str
    received_balance: int = Field(..., ge=0)
    recognitions_received_count: int = Field(..., ge=0)
    total_endorsements_received: int = Field(..., ge=0)
