from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    bonus_points: int
    experience: int

    class Config:
        from_attributes = True

class UserMe(UserRead):
    created_at: Optional[datetime] = None

class Recommendation(BaseModel):
    advice: str
    weakness: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ProfileRead(UserMe):
    phone: Optional[str] = None
    city: Optional[str] = None
    favorite_category: Optional[str] = None
    bio: Optional[str] = None
    goals: Optional[str] = None
    avatar_url: Optional[str] = None
    awards_count: int = 0
    matches_count: int = 0
    recommendations: List[Recommendation] = []

class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    favorite_category: Optional[str] = None
    bio: Optional[str] = None
    goals: Optional[str] = None
    avatar_url: Optional[str] = None

class AwardRead(BaseModel):
    id: int
    title: str
    place: Optional[str] = None
    year: int

    class Config:
        from_attributes = True

class HallOfFameProfile(BaseModel):
    name: str
    role: str
    bonus_points: int
    experience: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class HallOfFameMatch(BaseModel):
    title: str
    scheduled_at: Optional[datetime] = None
    video_url: Optional[str] = None
    points: int
    comment: Optional[str] = None

class HallOfFame(BaseModel):
    profile: HallOfFameProfile
    awards: List[AwardRead]
    matches: List[HallOfFameMatch]
