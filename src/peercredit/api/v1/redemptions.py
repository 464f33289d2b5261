"""Endpoints for credit redemptions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas import RedemptionCreate, RedemptionReceipt
from ...services import redemption_service
from ..transactions import commit_or_raise

router = APIRouter(prefix="/redeem", tags=["redemptions"])


@router.post(
    "",
    response_model=RedemptionReceipt,
    status_code=status.HTTP_200_OK,
    summary="Redeem credits",
    responses={
        200: {
            "description": "Redemption completed",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Credits redeemed successfully",
                        "voucher_value": 200,
                        "credits_redeemed": 40,
                        "received_balance": 35,
                    }
                }
            },
        },
        400: {"description": "Invalid amount"},
        500: {"description": "User missing or insufficient received credits"},
    },
)
def redeem_credits(
    payload: RedemptionCreate,
    db: Session = Depends(get_db),
) -> RedemptionReceipt:
    """Redeem received credits for a voucher.

    Example request body::

        {
            "user_id": 2,
            "credits_to_redeem": 40
        }
    """

    with commit_or_raise(db):
        result = redemption_service.redeem(
            db,
            user_id=payload.user_id,
            credits_to_redeem=payload.credits_to_redeem,
        )
    return RedemptionReceipt(
        voucher_value=result.voucher_value,
        credits_redeemed=result.credits_redeemed,
        received_balance=result.received_balance,
    )
