import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime, Text
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

DEFAULT_COMPETITION_TYPE = "Олимпиада"
DEFAULT_AGE_GROUP = "16+"

class Competition(Base):
    __tablename__ = "competitions"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    city = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False, index=True)
    competition_type = Column(String, nullable=False, default=DEFAULT_COMPETITION_TYPE)
    age_group = Column(String, nullable=False, default=DEFAULT_AGE_GROUP)
    format = Column(String, nullable=False) # e.g. "Онлайн", "Офлайн"
    start_date = Column(Date, nullable=False)
    entry_fee = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="open") # e.g. "open", "closed", "finished"
    description = Column(Text, default="")
    image_url = Column(String, default="")
    organizer_id = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    organizer = relationship("User", back_populates="organized_competitions")
    registrations = relationship("Registration", back_populates="competition", cascade="all, delete-orphan")
    matches = relationship("Match", back_populates="competition", cascade="all, delete-orphan")
    ai_notes = relationship("AiNote", back_populates="competition", cascade="all, delete-orphan")
