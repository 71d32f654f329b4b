import datetime
from enum import Enum

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

class UserRole(str, Enum):
    PARTICIPANT = "participant"
    JUDGE = "judge"
    ORGANIZER = "organizer"
    SPECTATOR = "spectator"
    ADMIN = "admin"

# Roles a user may pick for themselves at sign-up; admin is never self-assigned
SELF_ASSIGNABLE_ROLES = {
    UserRole.PARTICIPANT.value,
    UserRole.JUDGE.value,
    UserRole.ORGANIZER.value,
    UserRole.SPECTATOR.value,
}

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False) # Always stored lower-cased
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.PARTICIPANT.value)
    bonus_points = Column(Integer, nullable=False, default=0)
    experience = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    organized_competitions = relationship("Competition", back_populates="organizer")
    registrations = relationship("Registration", back_populates="user")
    bonus_transactions = relationship("BonusTransaction", back_populates="user")
    awards = relationship("Award", back_populates="user")


class Profile(Base):
    __tablename__ = "profiles"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    phone = Column(String, default="")
    city = Column(String, default="")
    favorite_category = Column(String, default="")
    bio = Column(String, default="")
    goals = Column(String, default="")
    avatar_url = Column(String, default="")
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    user = relationship("User", back_populates="profile")
