"""Scheduled credit reset logic."""

from __future__ import annotations

from sqlalchemy import case, update
from sqlalchemy.orm import Session

from ..core.constants import CARRY_OVER_CAP, MONTHLY_SEND_CAP
from ..models import Account


def reset_all_accounts(session: Session) -> int:
    """Refill every account's allowance with a capped carry-over.

    ``givable_balance`` becomes ``100 + min(givable_balance, 50)`` and
    ``sent_this_cycle`` drops to zero, in one bulk statement. Running it twice
    in one cycle applies the carry-over twice, so callers must not overlap
    runs. Returns the number of accounts updated.
    """

    carry_over = case(
        (Account.givable_balance > CARRY_OVER_CAP, CARRY_OVER_CAP),
        else_=Account.givable_balance,
    )
    stmt = (
        update(Account)
        .values(givable_balance=carry_over + MONTHLY_SEND_CAP, sent_this_cycle=0)
        .execution_options(synchronize_session=False)
    )
    result = session.execute(stmt)
    return result.rowcount
