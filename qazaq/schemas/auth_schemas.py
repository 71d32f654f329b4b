from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from .user_schemas import UserRead

class TokenData(BaseModel):
    id: int
    role: str

class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Optional[str] = None # Anything outside the self-assignable roles falls back to participant

class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class AuthResponse(BaseModel):
    token: str
    user: UserRead
