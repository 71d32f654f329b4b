from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from qazaq.services import auth_service, user_service
from qazaq.schemas import auth_schemas, bonus_schemas, user_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

@router.get("/hall-of-fame/me", response_model=user_schemas.HallOfFame)
async def read_hall_of_fame(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return user_service.get_hall_of_fame(db=db, user_id=current_user.id)

@router.get("/bonuses/me", response_model=bonus_schemas.BonusSummary)
async def read_bonuses(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return user_service.get_bonus_summary(db=db, user_id=current_user.id)
