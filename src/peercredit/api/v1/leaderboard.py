"""Leaderboard endpoint."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas import LeaderboardEntry
from ...services import leaderboard_service

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get(
    "",
    response_model=List[LeaderboardEntry],
    summary="Top credit recipients",
    responses={
        200: {
            "description": "Leaderboard entries ordered by received balance",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": 2,
                            "name": "Bianca Liu",
                            "received_balance": 80,
                            "recognitions_received_count": 3,
                            "total_endorsements_received": 5,
                        }
                    ]
                }
            },
        }
    },
)
def get_leaderboard(
    limit: int = Query(10, ge=1, le=100, description="Number of top accounts to return"),
    db: Session = Depends(get_db),
) -> List[LeaderboardEntry]:
    """Return ranked list of accounts based on credits received."""

    entries = leaderboard_service.top_recipients(db, limit=limit)
    response: List[LeaderboardEntry] = []
    for account, recognitions_count, endorsements in entries:
        response.append(
            LeaderboardEntry(
                id=account.id,
                name=account.name,
                received_balance=account.received_balance,
                recognitions_received_count=int(recognitions_count or 0),
                total_endorsements_received=int(endorsements or 0),
            )
        )
    return response
