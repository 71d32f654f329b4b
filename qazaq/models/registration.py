import datetime

from sqlalchemy import Column, Integer, ForeignKey, Boolean, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

UNIQUE_REGISTRATION = "uq_registration_competition_user"

class Registration(Base):
    __tablename__ = "competition_registrations"
    # The only guard against double registration; see registration_service.register
    __table_args__ = (UniqueConstraint("competition_id", "user_id", name=UNIQUE_REGISTRATION),)

    id = Column(Integer, primary_key=True, index=True)
    competition_id = Column(Integer, ForeignKey("competitions.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    checked_in = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    competition = relationship("Competition", back_populates="registrations")
    user = relationship("User", back_populates="registrations")
