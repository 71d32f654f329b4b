from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from qazaq.services import auth_service, competition_service, organizer_service
from qazaq.models.user import UserRole
from qazaq.schemas import auth_schemas, competition_schemas, organizer_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

organizer_only = auth_service.role_required(UserRole.ORGANIZER, UserRole.ADMIN)

@router.get("/services", response_model=List[organizer_schemas.OrganizerServiceRead])
async def list_services_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(organizer_only),
):
    return organizer_service.list_services(db=db)

@router.get("/competitions", response_model=List[competition_schemas.CompetitionRead])
async def list_own_competitions_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(organizer_only),
):
    return competition_service.list_organizer_competitions(db=db, actor=current_user)
