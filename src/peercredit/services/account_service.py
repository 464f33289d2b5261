"""Account store: the only writer of balance fields."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.database import is_unique_violation
from ..core.errors import AccountNotFound, DuplicateAccount, InvalidAmount
from ..models import Account


def ensure_positive_credits(value: object, field: str) -> int:
    """Reject non-integer, boolean and non-positive credit amounts."""

    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidAmount(f"{field} must be a positive integer.")
    return value


def create_account(session: Session, *, name: str, email: str) -> Account:
    """Register an account with default balances."""

    account = Account(name=name, email=email)
    session.add(account)
    try:
        session.flush()
    except IntegrityError as exc:
        if is_unique_violation(exc):
            raise DuplicateAccount(f"An account with email {email} already exists.") from exc
        raise
    return account


def get_account(session: Session, account_id: int) -> Account:
    account = session.get(Account, account_id)
    if account is None:
        raise AccountNotFound(f"Account {account_id} not found")
    return account


def lock_account(session: Session, account_id: int) -> Optional[Account]:
    """Load one account row holding an exclusive lock until the transaction ends."""

    stmt = (
        select(Account)
        .where(Account.id == account_id)
        .with_for_update(nowait=False)
        .execution_options(populate_existing=True)
    )
    return session.execute(stmt).scalar_one_or_none()


def debit_givable(account: Account, amount: int) -> None:
    account.givable_balance -= amount
    account.sent_this_cycle += amount


def debit_received(account: Account, amount: int) -> None:
    account.received_balance -= amount


def credit_received(session: Session, account_id: int, amount: int) -> bool:
    """Atomically add to an account's received balance; False if no such row."""

    stmt = (
        update(Account)
        .where(Account.id == account_id)
        .values(received_balance=Account.received_balance + amount)
        .execution_options(synchronize_session=False)
    )
    result = session.execute(stmt)
    return result.rowcount == 1
