"""Account model holding a user's credit balances."""

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.constants import DEFAULT_GIVABLE_BALANCE, MONTHLY_SEND_CAP
from ..core.database import Base


class Account(Base):
    """Represents a user participating in the credit economy."""

    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("email", name="accounts_email_unique"),
        CheckConstraint("givable_balance >= 0", name="accounts_givable_balance_positive"),
        CheckConstraint("received_balance >= 0", name="accounts_received_balance_positive"),
        CheckConstraint("sent_this_cycle >= 0", name="accounts_sent_this_cycle_positive"),
        CheckConstraint(f"sent_this_cycle <= {MONTHLY_SEND_CAP}", name="accounts_sent_this_cycle_cap"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    givable_balance = Column(Integer, nullable=False, default=DEFAULT_GIVABLE_BALANCE)
    sent_this_cycle = Column(Integer, nullable=False, default=0)
    received_balance = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    recognitions_sent = relationship(
        "Recognition",
        foreign_keys="Recognition.sender_id",
        back_populates="sender",
    )
    recognitions_received = relationship(
        "Recognition",
        foreign_keys="Recognition.recipient_id",
        back_populates="recipient",
    )
    endorsements = relationship("Endorsement", back_populates="user")
