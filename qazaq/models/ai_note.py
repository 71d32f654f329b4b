import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

class AiNote(Base):
    __tablename__ = "ai_notes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    competition_id = Column(Integer, ForeignKey("competitions.id", ondelete="CASCADE"), nullable=False)
    advice = Column(String, nullable=False)
    weakness = Column(String, default="")
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    competition = relationship("Competition", back_populates="ai_notes")
