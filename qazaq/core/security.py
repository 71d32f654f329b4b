from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi.security import OAuth2PasswordBearer

from qazaq.core.config import settings
from qazaq.core import errors
from qazaq.schemas import auth_schemas

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def create_user_token(user) -> str:
    # 'sub' carries the user id; the role rides along so role checks need no lookup
    return create_access_token(data={"sub": str(user.id), "role": user.role})

def verify_token(token: str) -> auth_schemas.TokenData:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise errors.AuthError("Invalid or expired token")

    subject = payload.get("sub")
    role = payload.get("role")
    if subject is None or role is None:
        raise errors.AuthError("Invalid or expired token")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise errors.AuthError("Invalid or expired token")
    return auth_schemas.TokenData(id=user_id, role=role)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
