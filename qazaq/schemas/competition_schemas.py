from pydantic import BaseModel, Field
from typing import Optional
import datetime as dt
from datetime import date, datetime

class CompetitionBase(BaseModel):
    title: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    format: str = Field(..., min_length=1)
    start_date: date
    competition_type: Optional[str] = None
    age_group: Optional[str] = None
    entry_fee: int = Field(0, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None

class CompetitionCreate(CompetitionBase):
    pass

class CompetitionUpdate(BaseModel):
    # Unset or null fields keep their stored value
    title: Optional[str] = None
    city: Optional[str] = None
    category: Optional[str] = None
    competition_type: Optional[str] = None
    age_group: Optional[str] = None
    format: Optional[str] = None
    start_date: Optional[date] = None
    entry_fee: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

class CompetitionRead(BaseModel):
    id: int
    title: str
    city: str
    category: str
    competition_type: str
    age_group: str
    format: str
    start_date: date
    entry_fee: int
    status: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    organizer_id: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class CompetitionListItem(CompetitionRead):
    organizer_name: Optional[str] = None
    participants_count: int = 0

class CompetitionFilters(BaseModel):
    city: Optional[str] = None
    category: Optional[str] = None
    competition_type: Optional[str] = None
    age_group: Optional[str] = None
    format: Optional[str] = None
    date: Optional[dt.date] = None # start_date on or after
    fee_type: Optional[str] = None # "free" or "paid"
    q: Optional[str] = None

class RegistrationResult(BaseModel):
    success: bool = True
    message: str
