from typing import List, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qazaq.services import auth_service, competition_service, registration_service
from qazaq.models.user import UserRole
from qazaq.schemas import auth_schemas, competition_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

can_manage = auth_service.role_required(UserRole.ORGANIZER, UserRole.ADMIN)
can_register = auth_service.role_required(UserRole.PARTICIPANT, UserRole.ADMIN)

@router.get("", response_model=List[competition_schemas.CompetitionListItem])
async def list_competitions_endpoint(
    filters: competition_schemas.CompetitionFilters = Depends(),
    db: Session = Depends(get_db),
):
    return competition_service.list_competitions(db=db, filters=filters)

@router.post("", response_model=competition_schemas.CompetitionRead, status_code=status.HTTP_201_CREATED)
async def create_competition_endpoint(
    competition_in: competition_schemas.CompetitionCreate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(can_manage),
):
    return competition_service.create_competition(db=db, competition=competition_in, actor=current_user)

@router.get("/{competition_id}", response_model=competition_schemas.CompetitionRead)
async def get_competition_endpoint(
    competition_id: int,
    db: Session = Depends(get_db),
):
    return competition_service.get_competition(db=db, competition_id=competition_id)

@router.put("/{competition_id}", response_model=competition_schemas.CompetitionRead)
async def update_competition_endpoint(
    competition_id: int,
    competition_in: competition_schemas.CompetitionUpdate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(can_manage),
):
    return competition_service.update_competition(
        db=db, competition_id=competition_id, competition_update=competition_in, actor=current_user
    )

@router.delete("/{competition_id}", response_model=Dict[str, bool])
async def delete_competition_endpoint(
    competition_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(can_manage),
):
    competition_service.delete_competition(db=db, competition_id=competition_id, actor=current_user)
    return {"success": True}

@router.post("/{competition_id}/register", response_model=competition_schemas.RegistrationResult, status_code=status.HTTP_201_CREATED)
async def register_for_competition_endpoint(
    competition_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(can_register),
):
    message = registration_service.register(db=db, competition_id=competition_id, user_id=current_user.id)
    return competition_schemas.RegistrationResult(message=message)
