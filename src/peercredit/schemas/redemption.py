"""Pydantic schemas for redemption workflows."""

from pydantic import BaseModel, Field


class RedemptionCreate(BaseModel):
    """Incoming payload for redeeming credits."""

    user_id: int
    credits_to_redeem: int = Field(..., gt=0, strict=True, description="Number of credits to redeem.")


class RedemptionReceipt(BaseModel):
    """Response returned after processing a redemption."""

    message: str = "Credits redeemed successfully"
    voucher_value: int = Field(..., ge=0)
    credits_redeemed: int = Field(..., gt=0)
    received_balance: int = Field(..., ge=0, description="Received balance left after this redemption.")
