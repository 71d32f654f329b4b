from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from qazaq.services import auth_service, advisory_service
from qazaq.models.user import UserRole
from qazaq.schemas import ai_schemas, auth_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

@router.get("/advice", response_model=ai_schemas.AdviceRead)
async def get_advice_endpoint(
    competition_id: int = Query(..., alias="competitionId", gt=0),
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return advisory_service.get_advice(db=db, user_id=current_user.id, competition_id=competition_id)

@router.get("/chances", response_model=List[ai_schemas.WinChance])
async def get_win_chances_endpoint(
    competition_id: int = Query(..., alias="competitionId", gt=0),
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return advisory_service.get_win_chances(db=db, competition_id=competition_id)

@router.post("/draw", response_model=ai_schemas.DrawResult)
async def draw_endpoint(
    draw_in: ai_schemas.DrawRequest,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.role_required(UserRole.ORGANIZER, UserRole.ADMIN)),
):
    pairs = advisory_service.draw_pairs(db=db, competition_id=draw_in.competition_id)
    return ai_schemas.DrawResult(pairs=pairs)

@router.get("/weakness", response_model=ai_schemas.WeaknessAnalysis)
async def get_weakness_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return advisory_service.analyze_weakness(db=db, user_id=current_user.id)
