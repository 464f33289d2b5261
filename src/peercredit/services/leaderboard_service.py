"""Leaderboard aggregation services."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import Account, Endorsement, Recognition


def top_recipients(session: Session, *, limit: int = 10) -> Sequence[tuple]:
    """Return leaderboard rows ordered by received balance and account id.

    Each row is ``(Account, recognitions_received_count,
    total_endorsements_received)``.
    """

    recognitions_count = (
        select(func.count(Recognition.id))
        .where(Recognition.recipient_id == Account.id)
        .correlate(Account)
        .scalar_subquery()
        .label("recognitions_received_count")
    )
    endorsements_total = (
        select(func.count(Endorsement.id))
        .select_from(Endorsement)
        .join(Recognition, Endorsement.recognition_id == Recognition.id)
        .where(Recognition.recipient_id == Account.id)
        .correlate(Account)
        .scalar_subquery()
        .label("total_endorsements_received")
    )

    stmt = (
        select(Account, recognitions_count, endorsements_total)
        .order_by(Account.received_balance.desc(), Account.id.asc())
        .limit(limit)
    )

    return session.execute(stmt).all()
