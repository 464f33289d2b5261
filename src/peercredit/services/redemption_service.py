"""Domain logic for redeeming received credits."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from ..core.constants import VOUCHER_RATE
from ..core.errors import InsufficientRedeemableCredits, UserNotFound
from . import account_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedemptionResult:
    user_id: int
    credits_redeemed: int
    voucher_value: int
    received_balance: int


def voucher_value(credits: int) -> int:
    return credits * VOUCHER_RATE


def redeem(
    session: Session,
    *,
    user_id: int,
    credits_to_redeem: int,
) -> RedemptionResult:
    """Deduct received credits and return the voucher they are worth."""

    account_service.ensure_positive_credits(credits_to_redeem, "credits_to_redeem")

    account = account_service.lock_account(session, user_id)
    if account is None:
        raise UserNotFound(f"User {user_id} not found")

    if credits_to_redeem > account.received_balance:
        raise InsufficientRedeemableCredits(
            f"Insufficient credits to redeem: {account.received_balance} available."
        )

    account_service.debit_received(account, credits_to_redeem)
    session.flush()

    logger.info("user %s redeemed %d credits", user_id, credits_to_redeem)
    return RedemptionResult(
        user_id=user_id,
        credits_redeemed=credits_to_redeem,
        voucher_value=voucher_value(credits_to_redeem),
        received_balance=account.received_balance,
    )
