from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

class AdviceRead(BaseModel):
    advice: str
    weakness: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class WinChance(BaseModel):
    participant: str
    win_chance: int = Field(..., alias="winChance")

    class Config:
        populate_by_name = True

class DrawRequest(BaseModel):
    competition_id: int

class DrawResult(BaseModel):
    pairs: List[List[str]]

class WeaknessAnalysis(BaseModel):
    analysis: str
    based_on: Optional[str] = Field(None, alias="basedOn")

    class Config:
        populate_by_name = True
