from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class ScoreCreate(BaseModel):
    match_id: int
    participant_id: int
    points: int
    comment: Optional[str] = None

class QrCheckRequest(BaseModel):
    competition_id: int
    participant_email: str = Field(..., min_length=1)

class CheckedInParticipant(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class QrCheckResult(BaseModel):
    success: bool = True
    participant: CheckedInParticipant

class JudgeMatchRow(BaseModel):
    id: int
    title: str
    scheduled_at: Optional[datetime] = None
    status: Optional[str] = None
    competition_title: str
    user_id: Optional[int] = None
    participant_name: Optional[str] = None

class LiveMatch(BaseModel):
    id: int
    competition_id: int
    judge_id: Optional[int] = None
    title: str
    scheduled_at: Optional[datetime] = None
    status: Optional[str] = None
    video_url: Optional[str] = None
    competition_title: str
    city: str
    category: str
