"""Recognition endorsement model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base


class Endorsement(Base):
    """Represents a user's endorsement on a recognition."""

    __tablename__ = "endorsements"
    __table_args__ = (
        UniqueConstraint("user_id", "recognition_id", name="endorsements_user_recognition_unique"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=False)
    recognition_id = Column(
        Integer, ForeignKey("recognitions.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    recognition = relationship("Recognition", back_populates="endorsements")
    user = relationship("Account", back_populates="endorsements")
