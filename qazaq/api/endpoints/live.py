from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from qazaq.services import scoring_service
from qazaq.schemas import judge_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

@router.get("", response_model=List[judge_schemas.LiveMatch])
async def list_live_matches_endpoint(
    db: Session = Depends(get_db),
):
    return scoring_service.list_live_matches(db=db)
