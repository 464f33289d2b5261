"""Pydantic schemas for account endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class AccountCreate(BaseModel):
    """Request body for registering an account."""

    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=254)


class AccountRead(BaseModel):
    """Account projection including all three balances."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    received_balance: int
    givable_balance: int
    sent_this_cycle: int
