"""Request-scoped transaction helper shared by mutating routes."""

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ..core.errors import LedgerError


@contextmanager
def commit_or_raise(db: Session) -> Iterator[None]:
    """Commit the block's work, or roll back and map ledger errors to HTTP."""

    try:
        yield
        db.commit()
    except LedgerError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.to_detail()) from exc
