from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

class Match(Base):
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, index=True)
    competition_id = Column(Integer, ForeignKey("competitions.id", ondelete="CASCADE"), nullable=False)
    judge_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    title = Column(String, nullable=False)
    scheduled_at = Column(DateTime, nullable=True)
    status = Column(String, default="scheduled") # e.g. "scheduled", "live", "finished"
    video_url = Column(String, default="")

    competition = relationship("Competition", back_populates="matches")
    judge = relationship("User", foreign_keys=[judge_id])
    scores = relationship("Score", back_populates="match", cascade="all, delete-orphan")
