from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

class Award(Base):
    __tablename__ = "awards"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    place = Column(String, default="") # e.g. "1 место", "Финалист"
    year = Column(Integer, nullable=False)

    user = relationship("User", back_populates="awards")
