import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

class Score(Base):
    __tablename__ = "scores"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False)
    participant_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    judge_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    points = Column(Integer, nullable=False)
    comment = Column(String, default="")
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    match = relationship("Match", back_populates="scores")
    participant = relationship("User", foreign_keys=[participant_id])
    judge = relationship("User", foreign_keys=[judge_id])
