import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from qazaq.core.database import Base

class BonusTransaction(Base):
    """Append-only ledger row. Rows are never updated or deleted."""
    __tablename__ = "bonus_transactions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False) # Signed: credits positive, debits negative
    type = Column(String, nullable=False) # "credit" or "debit"
    description = Column(String, default="")
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    user = relationship("User", back_populates="bonus_transactions")
