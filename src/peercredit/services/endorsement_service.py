"""Domain logic for recognition endorsements."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.database import is_unique_violation
from ..core.errors import DuplicateEndorsement
from ..models import Endorsement


def endorse(
    session: Session,
    *,
    user_id: int,
    recognition_id: int,
) -> Endorsement:
    """Insert an endorsement; the unique constraint is the duplicate check."""

    endorsement = Endorsement(user_id=user_id, recognition_id=recognition_id)
    session.add(endorsement)
    try:
        session.flush()
    except IntegrityError as exc:
        if is_unique_violation(exc):
            raise DuplicateEndorsement("You have already endorsed this recognition.") from exc
        raise
    return endorsement


def list_endorsements(
    session: Session,
    *,
    recognition_id: int,
    limit: int = 100,
    offset: int = 0,
) -> Sequence[Endorsement]:
    """Return endorsements for a recognition."""

    stmt = (
        select(Endorsement)
        .where(Endorsement.recognition_id == recognition_id)
        .order_by(Endorsement.created_at.desc(), Endorsement.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return session.execute(stmt).scalars().all()
