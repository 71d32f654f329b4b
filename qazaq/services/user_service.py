import datetime
from typing import List

from sqlalchemy.orm import Session

from qazaq.core import errors
from qazaq.models import user as user_model
from qazaq.models import award as award_model
from qazaq.models import score as score_model
from qazaq.models import match as match_model
from qazaq.models import ai_note as ai_note_model
from qazaq.models import bonus_transaction as bonus_model
from qazaq.schemas import user_schemas, bonus_schemas

PROFILE_FIELDS = ("phone", "city", "favorite_category", "bio", "goals", "avatar_url")
RECOMMENDATIONS_LIMIT = 3


def _get_user_or_404(db: Session, user_id: int) -> user_model.User:
    user = db.query(user_model.User).filter(user_model.User.id == user_id).first()
    if not user:
        raise errors.NotFoundError("User not found")
    return user


def get_me(db: Session, user_id: int) -> user_schemas.UserMe:
    return user_schemas.UserMe.model_validate(_get_user_or_404(db, user_id))


def get_profile(db: Session, user_id: int) -> user_schemas.ProfileRead:
    user = _get_user_or_404(db, user_id)

    awards_count = db.query(award_model.Award).filter(award_model.Award.user_id == user_id).count()
    matches_count = db.query(score_model.Score).filter(score_model.Score.participant_id == user_id).count()
    recommendations = db.query(ai_note_model.AiNote)\
        .filter(ai_note_model.AiNote.user_id == user_id)\
        .order_by(ai_note_model.AiNote.created_at.desc(), ai_note_model.AiNote.id.desc())\
        .limit(RECOMMENDATIONS_LIMIT)\
        .all()

    profile_data = {}
    if user.profile:
        profile_data = {field: getattr(user.profile, field) for field in PROFILE_FIELDS}

    return user_schemas.ProfileRead(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        bonus_points=user.bonus_points,
        experience=user.experience,
        created_at=user.created_at,
        awards_count=awards_count,
        matches_count=matches_count,
        recommendations=[user_schemas.Recommendation.model_validate(note) for note in recommendations],
        **profile_data,
    )


def update_profile(db: Session, user_id: int, profile_update: user_schemas.ProfileUpdate) -> user_schemas.ProfileRead:
    """
    Rename the user and replace the profile fields.

    Profile fields are written wholesale: anything not sent is stored as an
    empty string. Only ``name`` is optional in the partial-update sense: a
    missing or empty name keeps the current one.
    """
    user = _get_user_or_404(db, user_id)

    if profile_update.name:
        name = profile_update.name.strip()
        if len(name) < 2:
            raise errors.ValidationError("Name must be at least 2 characters long")
        user.name = name

    if user.profile is None:
        user.profile = user_model.Profile()

    for field in PROFILE_FIELDS:
        setattr(user.profile, field, getattr(profile_update, field) or "")
    user.profile.updated_at = datetime.datetime.utcnow()

    db.commit()
    db.refresh(user)
    return get_profile(db, user_id)


def get_hall_of_fame(db: Session, user_id: int) -> user_schemas.HallOfFame:
    user = _get_user_or_404(db, user_id)

    awards = db.query(award_model.Award)\
        .filter(award_model.Award.user_id == user_id)\
        .order_by(award_model.Award.year.desc())\
        .all()

    rows = db.query(
        match_model.Match.title,
        match_model.Match.scheduled_at,
        match_model.Match.video_url,
        score_model.Score.points,
        score_model.Score.comment,
    ).join(score_model.Score, score_model.Score.match_id == match_model.Match.id)\
        .filter(score_model.Score.participant_id == user_id)\
        .order_by(match_model.Match.scheduled_at.desc())\
        .all()

    return user_schemas.HallOfFame(
        profile=user_schemas.HallOfFameProfile.model_validate(user),
        awards=[user_schemas.AwardRead.model_validate(a) for a in awards],
        matches=[user_schemas.HallOfFameMatch(**row._asdict()) for row in rows],
    )


def get_bonus_summary(db: Session, user_id: int) -> bonus_schemas.BonusSummary:
    user = _get_user_or_404(db, user_id)
    transactions: List[bonus_model.BonusTransaction] = db.query(bonus_model.BonusTransaction)\
        .filter(bonus_model.BonusTransaction.user_id == user_id)\
        .order_by(bonus_model.BonusTransaction.created_at.desc(), bonus_model.BonusTransaction.id.desc())\
        .all()
    return bonus_schemas.BonusSummary(
        profile=bonus_schemas.BonusBalance.model_validate(user),
        transactions=[bonus_schemas.BonusTransactionRead.model_validate(t) for t in transactions],
    )
