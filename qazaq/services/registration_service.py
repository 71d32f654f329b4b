import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from qazaq.core import errors
from qazaq.models import competition as competition_model
from qazaq.models import registration as registration_model
from qazaq.models import bonus_transaction as bonus_model
from qazaq.models import user as user_model
from qazaq.services import points

logger = logging.getLogger(__name__)

ALREADY_REGISTERED = "You are already registered for this competition"
REGISTRATION_CONFIRMED = "Registration confirmed"


def _is_duplicate_registration(exc: IntegrityError) -> bool:
    """True only when ``exc`` is the unique (competition_id, user_id) violation."""
    message = str(exc.orig)
    # PostgreSQL names the constraint; SQLite lists the columns
    return (
        registration_model.UNIQUE_REGISTRATION in message
        or "UNIQUE constraint failed: competition_registrations.competition_id" in message
    )


def register(db: Session, competition_id: int, user_id: int) -> str:
    """
    Enroll ``user_id`` in ``competition_id`` and credit the registration bonus.

    The registration row, the balance increments and the ledger row are one
    transaction: either all three land or none do. Duplicates are detected
    solely by the unique (competition_id, user_id) constraint on insert, with
    no read-before-write check.
    """
    competition = db.query(competition_model.Competition)\
        .filter(competition_model.Competition.id == competition_id)\
        .first()
    if not competition:
        raise errors.NotFoundError("Competition not found")

    title = competition.title
    if not db.query(user_model.User.id).filter(user_model.User.id == user_id).first():
        raise errors.NotFoundError("User not found")
    bonus_delta = points.registration_bonus(competition.entry_fee)

    try:
        db.add(registration_model.Registration(competition_id=competition_id, user_id=user_id))
        db.flush()
    except IntegrityError as exc:
        db.rollback()
        if not _is_duplicate_registration(exc):
            raise
        logger.info("User %s is already registered for competition %s", user_id, competition_id)
        raise errors.ConflictError(ALREADY_REGISTERED)

    try:
        db.query(user_model.User)\
            .filter(user_model.User.id == user_id)\
            .update(
                {
                    user_model.User.bonus_points: user_model.User.bonus_points + bonus_delta,
                    user_model.User.experience: user_model.User.experience + points.REGISTRATION_EXPERIENCE,
                },
                synchronize_session=False,
            )
        db.add(bonus_model.BonusTransaction(
            user_id=user_id,
            amount=bonus_delta,
            type="credit",
            description=f"Бонус за регистрацию в {title}",
        ))
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "User %s registered for competition %s, credited %s bonus points",
        user_id, competition_id, bonus_delta,
    )
    return REGISTRATION_CONFIRMED
