"""Service layer exports."""

from . import (
	account_service,
	endorsement_service,
	leaderboard_service,
	monthly_reset_service,
	redemption_service,
	transfer_service,
)

__all__ = [
	"account_service",
	"endorsement_service",
	"leaderboard_service",
	"monthly_reset_service",
	"redemption_service",
	"transfer_service",
]
