from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class BonusTransactionRead(BaseModel):
    id: int
    user_id: int
    amount: int
    type: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class BonusBalance(BaseModel):
    bonus_points: int
    experience: int

    class Config:
        from_attributes = True

class BonusSummary(BaseModel):
    profile: BonusBalance
    transactions: List[BonusTransactionRead]
