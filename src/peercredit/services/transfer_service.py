"""Domain logic for credit transfers between accounts."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.constants import MONTHLY_SEND_CAP
from ..core.errors import (
    InsufficientCredits,
    InvalidTransfer,
    MonthlyLimitExceeded,
    RecipientNotFound,
    SenderNotFound,
)
from ..models import Recognition
from . import account_service

logger = logging.getLogger(__name__)


def transfer(
    session: Session,
    *,
    sender_id: int,
    recipient_id: int,
    amount: int,
    message: Optional[str] = None,
) -> Recognition:
    """Move credits from sender to recipient and record the recognition.

    Runs inside the caller's transaction. Any raised error must be followed
    by a rollback, which leaves balances and the recognition log untouched.
    """

    if sender_id == recipient_id:
        raise InvalidTransfer("Self-recognition is not allowed.")
    account_service.ensure_positive_credits(amount, "amount")

    sender = account_service.lock_account(session, sender_id)
    if sender is None:
        raise SenderNotFound(f"Sender {sender_id} not found")

    if amount > sender.givable_balance:
        raise InsufficientCredits(
            f"Insufficient credits: {sender.givable_balance} available, {amount} requested."
        )

    if sender.sent_this_cycle + amount > MONTHLY_SEND_CAP:
        remaining = max(MONTHLY_SEND_CAP - sender.sent_this_cycle, 0)
        raise MonthlyLimitExceeded(
            f"Monthly sending limit exceeded. Remaining credits for month: {remaining}."
        )

    account_service.debit_givable(sender, amount)
    session.flush()

    if not account_service.credit_received(session, recipient_id, amount):
        raise RecipientNotFound(f"Recipient {recipient_id} not found")

    recognition = Recognition(
        sender_id=sender_id,
        recipient_id=recipient_id,
        amount=amount,
        message=message,
    )
    session.add(recognition)
    session.flush()

    logger.info("transfer %s -> %s of %d credits (recognition %s)", sender_id, recipient_id, amount, recognition.id)
    return recognition


def list_recognitions(
    session: Session,
    *,
    sender_id: Optional[int] = None,
    recipient_id: Optional[int] = None,
    limit: int = 50,
    offset: int = 0,
) -> Sequence[Recognition]:
    """Retrieve recognitions with optional filters."""

    stmt = (
        select(Recognition)
        .order_by(Recognition.created_at.desc(), Recognition.id.desc())
        .offset(offset)
        .limit(limit)
    )

    if sender_id is not None:
        stmt = stmt.where(Recognition.sender_id == sender_id)
    if recipient_id is not None:
        stmt = stmt.where(Recognition.recipient_id == recipient_id)

    return session.execute(stmt).scalars().all()
