"""Account endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import LedgerError
from ...schemas import AccountCreate, AccountRead
from ...services import account_service
from ..transactions import commit_or_raise

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post(
    "",
    response_model=AccountRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register an account",
    responses={
        201: {
            "description": "Account created",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "name": "Alex Rao",
                        "email": "alex.rao@example.com",
                        "received_balance": 0,
                        "givable_balance": 100,
                        "sent_this_cycle": 0,
                    }
                }
            },
        },
        409: {"description": "Email already registered"},
    },
)
def create_account(
    payload: AccountCreate,
    db: Session = Depends(get_db),
) -> AccountRead:
    """Create an account with the default monthly allowance."""

    with commit_or_raise(db):
        account = account_service.create_account(db, name=payload.name, email=payload.email)
    db.refresh(account)
    return AccountRead.model_validate(account)


@router.get(
    "/{account_id}",
    response_model=AccountRead,
    summary="Fetch an account",
    responses={404: {"description": "Account not found"}},
)
def get_account(account_id: int, db: Session = Depends(get_db)) -> AccountRead:
    try:
        account = account_service.get_account(db, account_id)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.to_detail()) from exc
    return AccountRead.model_validate(account)
