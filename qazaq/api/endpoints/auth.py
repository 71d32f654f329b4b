from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qazaq.services import auth_service, user_service
from qazaq.schemas import auth_schemas, user_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

@router.post("/register", response_model=auth_schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_endpoint(
    payload: auth_schemas.RegisterRequest,
    db: Session = Depends(get_db),
):
    return auth_service.register_user(db=db, payload=payload)

@router.post("/login", response_model=auth_schemas.AuthResponse)
async def login_endpoint(
    payload: auth_schemas.LoginRequest,
    db: Session = Depends(get_db),
):
    return auth_service.authenticate_user(db=db, payload=payload)

@router.get("/me", response_model=user_schemas.UserMe)
async def read_me(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return user_service.get_me(db=db, user_id=current_user.id)
