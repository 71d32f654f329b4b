from typing import List, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qazaq.services import auth_service, scoring_service
from qazaq.models.user import UserRole
from qazaq.schemas import auth_schemas, judge_schemas
from qazaq.api.dependencies import get_db

router = APIRouter()

judge_only = auth_service.role_required(UserRole.JUDGE, UserRole.ADMIN)

@router.get("/matches", response_model=List[judge_schemas.JudgeMatchRow])
async def list_judge_matches_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(judge_only),
):
    return scoring_service.list_judge_matches(db=db, actor=current_user)

@router.post("/score", response_model=Dict[str, bool], status_code=status.HTTP_201_CREATED)
async def submit_score_endpoint(
    score_in: judge_schemas.ScoreCreate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(judge_only),
):
    scoring_service.submit_score(db=db, score_in=score_in, judge_id=current_user.id)
    return {"success": True}

@router.post("/qr-check", response_model=judge_schemas.QrCheckResult)
async def qr_check_endpoint(
    check_in: judge_schemas.QrCheckRequest,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(judge_only),
):
    return scoring_service.qr_check_in(db=db, check_in=check_in, judge_id=current_user.id)
