from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from qazaq.services import auth_service, user_service
from qazaq.schemas import auth_schemas, user_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

@router.get("/me", response_model=user_schemas.ProfileRead)
async def read_profile(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return user_service.get_profile(db=db, user_id=current_user.id)

@router.put("/me", response_model=user_schemas.ProfileRead)
async def update_profile(
    profile_in: user_schemas.ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return user_service.update_profile(db=db, user_id=current_user.id, profile_update=profile_in)
