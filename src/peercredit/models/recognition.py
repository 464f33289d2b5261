"""Recognition model representing credit transfers."""

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base


class Recognition(Base):
    """Immutable record of one transfer from sender to recipient."""

    __tablename__ = "recognitions"
    __table_args__ = (
        CheckConstraint("sender_id <> recipient_id", name="recognitions_sender_recipient_check"),
        CheckConstraint("amount > 0", name="recognitions_amount_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(Integer, ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=False, index=True)
    recipient_id = Column(Integer, ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    message = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    sender = relationship("Account", foreign_keys=[sender_id], back_populates="recognitions_sent")
    recipient = relationship("Account", foreign_keys=[recipient_id], back_populates="recognitions_received")
    endorsements = relationship("Endorsement", back_populates="recognition")
