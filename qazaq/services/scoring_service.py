import logging
from typing import List

from sqlalchemy.orm import Session

from qazaq.core import errors
from qazaq.models import competition as competition_model
from qazaq.models import match as match_model
from qazaq.models import registration as registration_model
from qazaq.models import score as score_model
from qazaq.models import user as user_model
from qazaq.schemas import auth_schemas, judge_schemas
from qazaq.services import points
from qazaq.services.auth_service import normalize_email

logger = logging.getLogger(__name__)

ADMIN = user_model.UserRole.ADMIN.value


def submit_score(db: Session, score_in: judge_schemas.ScoreCreate, judge_id: int) -> score_model.Score:
    """
    Record a judge's points for a participant in a match.

    The participant also gains experience (half the points, rounded) and a
    flat bonus. That bonus is applied to the balance only and is not written
    to the bonus ledger.
    """
    match = db.query(match_model.Match).filter(match_model.Match.id == score_in.match_id).first()
    if not match:
        raise errors.NotFoundError("Match not found")

    participant = db.query(user_model.User).filter(user_model.User.id == score_in.participant_id).first()
    if not participant:
        raise errors.NotFoundError("Participant not found")

    db_score = score_model.Score(
        match_id=score_in.match_id,
        participant_id=score_in.participant_id,
        judge_id=judge_id,
        points=score_in.points,
        comment=score_in.comment or "",
    )
    try:
        db.add(db_score)
        # TODO: log this flat bonus to bonus_transactions once product decides how score credits should be described
        db.query(user_model.User)\
            .filter(user_model.User.id == score_in.participant_id)\
            .update(
                {
                    user_model.User.experience: user_model.User.experience + points.score_experience(score_in.points),
                    user_model.User.bonus_points: user_model.User.bonus_points + points.SCORE_FLAT_BONUS,
                },
                synchronize_session=False,
            )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(db_score)
    logger.info(
        "Judge %s scored participant %s in match %s: %s points",
        judge_id, score_in.participant_id, score_in.match_id, score_in.points,
    )
    return db_score


def qr_check_in(db: Session, check_in: judge_schemas.QrCheckRequest, judge_id: int) -> judge_schemas.QrCheckResult:
    participant = db.query(user_model.User)\
        .filter(user_model.User.email == normalize_email(check_in.participant_email))\
        .first()
    if not participant:
        raise errors.NotFoundError("Participant not found")

    registration = db.query(registration_model.Registration).filter(
        registration_model.Registration.competition_id == check_in.competition_id,
        registration_model.Registration.user_id == participant.id,
    ).first()
    if not registration:
        raise errors.NotFoundError("Participant is not registered for this competition")

    if not registration.checked_in:
        registration.checked_in = True
        db.commit()
        logger.info(
            "Judge %s checked in participant %s for competition %s",
            judge_id, participant.id, check_in.competition_id,
        )

    return judge_schemas.QrCheckResult(
        participant=judge_schemas.CheckedInParticipant.model_validate(participant),
    )


def list_judge_matches(db: Session, actor: auth_schemas.TokenData) -> List[judge_schemas.JudgeMatchRow]:
    """Matches assigned to the judge (every match for an admin), one row per registrant."""
    Match = match_model.Match
    Competition = competition_model.Competition
    Registration = registration_model.Registration
    User = user_model.User

    query = db.query(
        Match.id,
        Match.title,
        Match.scheduled_at,
        Match.status,
        Competition.title.label("competition_title"),
        Registration.user_id,
        User.name.label("participant_name"),
    ).join(Competition, Competition.id == Match.competition_id)\
        .outerjoin(Registration, Registration.competition_id == Competition.id)\
        .outerjoin(User, User.id == Registration.user_id)

    if actor.role != ADMIN:
        query = query.filter(Match.judge_id == actor.id)

    rows = query.order_by(Match.scheduled_at.asc(), Match.id.asc(), Registration.user_id.asc()).all()
    return [judge_schemas.JudgeMatchRow(**row._asdict()) for row in rows]


def list_live_matches(db: Session) -> List[judge_schemas.LiveMatch]:
    Match = match_model.Match
    Competition = competition_model.Competition

    rows = db.query(
        Match.id,
        Match.competition_id,
        Match.judge_id,
        Match.title,
        Match.scheduled_at,
        Match.status,
        Match.video_url,
        Competition.title.label("competition_title"),
        Competition.city,
        Competition.category,
    ).join(Competition, Competition.id == Match.competition_id)\
        .order_by(Match.scheduled_at.asc(), Match.id.asc())\
        .all()
    return [judge_schemas.LiveMatch(**row._asdict()) for row in rows]
