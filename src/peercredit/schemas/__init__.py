"""Public schema exports."""

from .account import AccountCreate, AccountRead
from .endorsement import EndorsementCreate, EndorsementRead
from .leaderboard import LeaderboardEntry
from .recognition import RecognitionCreate, RecognitionRead
from .redemption import RedemptionCreate, RedemptionReceipt

__all__ = [
	"AccountCreate",
	"AccountRead",
	"EndorsementCreate",
	"EndorsementRead",
	"LeaderboardEntry",
	"RecognitionCreate",
	"RecognitionRead",
	"RedemptionCreate",
	"RedemptionReceipt",
]
