"""SQLAlchemy models for PeerCredit."""

from .account import Account
from .endorsement import Endorsement
from .recognition import Recognition

__all__ = [
    "Account",
    "Endorsement",
    "Recognition",
]
