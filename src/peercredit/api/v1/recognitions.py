"""Recognition and endorsement endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas import EndorsementCreate, EndorsementRead, RecognitionCreate, RecognitionRead
from ...services import endorsement_service, transfer_service
from ..transactions import commit_or_raise

router = APIRouter(prefix="/recognitions", tags=["recognitions"])


@router.post(
    "",
    response_model=RecognitionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a recognition",
    responses={
        201: {
            "description": "Recognition created",
            "content": {
                "application/json": {
                    "example": {
                        "id": 42,
                        "sender_id": 1,
                        "recipient_id": 2,
                        "amount": 30,
                        "message": "Thanks for leading the robotics workshop!",
                        "created_at": "2025-11-12T10:15:30",
                    }
                }
            },
        },
        400: {"description": "Self-recognition or invalid amount"},
        500: {"description": "Sender/recipient missing, insufficient credits or monthly limit exceeded"},
    },
)
def create_recognition(
    payload: RecognitionCreate,
    db: Session = Depends(get_db),
) -> RecognitionRead:
    """Transfer credits from one account to another.

    Example request body::

        {
            "sender_id": 1,
            "recipient_id": 2,
            "amount": 30,
            "message": "Thanks for leading the robotics workshop!"
        }
    """

    with commit_or_raise(db):
        recognition = transfer_service.transfer(
            db,
            sender_id=payload.sender_id,
            recipient_id=payload.recipient_id,
            amount=payload.amount,
            message=payload.message,
        )
    db.refresh(recognition)
    return RecognitionRead.model_validate(recognition)


@router.get(
    "",
    response_model=List[RecognitionRead],
    summary="List recognitions",
)
def list_recognitions(
    *,
    sender_id: Optional[int] = Query(None, description="Filter by sender id"),
    recipient_id: Optional[int] = Query(None, description="Filter by recipient id"),
    limit: int = Query(50, ge=1, le=100, description="Maximum items to return"),
    offset: int = Query(0, ge=0, description="Items to skip for pagination"),
    db: Session = Depends(get_db),
) -> List[RecognitionRead]:
    """Fetch recognitions with optional sender/recipient filters."""

    recognitions = transfer_service.list_recognitions(
        db,
        sender_id=sender_id,
        recipient_id=recipient_id,
        limit=limit,
        offset=offset,
    )
    return [RecognitionRead.model_validate(item) for item in recognitions]


@router.post(
    "/{recognition_id}/endorse",
    response_model=EndorsementRead,
    status_code=status.HTTP_201_CREATED,
    summary="Endorse a recognition",
    responses={409: {"description": "Recognition already endorsed by this user"}},
)
def endorse_recognition(
    recognition_id: int,
    payload: EndorsementCreate,
    db: Session = Depends(get_db),
) -> EndorsementRead:
    """Register an endorsement for a recognition.

    Example request body::

        {"user_id": 3}
    """

    with commit_or_raise(db):
        endorsement = endorsement_service.endorse(
            db,
            user_id=payload.user_id,
            recognition_id=recognition_id,
        )
    db.refresh(endorsement)
    return EndorsementRead.model_validate(endorsement)


@router.get(
    "/{recognition_id}/endorsements",
    response_model=List[EndorsementRead],
    summary="List endorsements for a recognition",
)
def list_endorsements(
    recognition_id: int,
    limit: int = Query(50, ge=1, le=100, description="Maximum items to return"),
    offset: int = Query(0, ge=0, description="Items to skip for pagination"),
    db: Session = Depends(get_db),
) -> List[EndorsementRead]:
    endorsements = endorsement_service.list_endorsements(
        db,
        recognition_id=recognition_id,
        limit=limit,
        offset=offset,
    )
    return [EndorsementRead.model_validate(item) for item in endorsements]
