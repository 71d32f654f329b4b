import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy import or_
from sqlalchemy.orm import Session

from qazaq.core import errors
from qazaq.models import competition as competition_model
from qazaq.models import registration as registration_model
from qazaq.models import user as user_model
from qazaq.schemas import auth_schemas, competition_schemas

logger = logging.getLogger(__name__)

Competition = competition_model.Competition
ADMIN = user_model.UserRole.ADMIN.value

# Text fields an update may blank out; other blanks keep the stored value
CLEARABLE_FIELDS = {"description", "image_url"}


def _participants_count():
    return (
        select(func.count(registration_model.Registration.id))
        .where(registration_model.Registration.competition_id == Competition.id)
        .correlate(Competition)
        .scalar_subquery()
    )


def list_competitions(db: Session, filters: competition_schemas.CompetitionFilters) -> List[competition_schemas.CompetitionListItem]:
    """
    All competitions matching every given filter, earliest start first.

    ``q`` is a substring match over title, description and city using ILIKE.
    PostgreSQL folds case for any script; SQLite only folds ASCII letters.
    """
    query = db.query(
        Competition,
        user_model.User.name.label("organizer_name"),
        _participants_count().label("participants_count"),
    ).outerjoin(user_model.User, Competition.organizer_id == user_model.User.id)

    for field in ("city", "category", "competition_type", "age_group", "format"):
        value = getattr(filters, field)
        if value:
            query = query.filter(getattr(Competition, field) == value)
    if filters.date:
        query = query.filter(Competition.start_date >= filters.date)
    if filters.fee_type == "free":
        query = query.filter(Competition.entry_fee == 0)
    elif filters.fee_type == "paid":
        query = query.filter(Competition.entry_fee > 0)
    if filters.q:
        # "%" and "_" in the search text are literal characters
        query = query.filter(or_(
            Competition.title.icontains(filters.q, autoescape=True),
            Competition.description.icontains(filters.q, autoescape=True),
            Competition.city.icontains(filters.q, autoescape=True),
        ))

    rows = query.order_by(Competition.start_date.asc(), Competition.id.asc()).all()
    return [
        competition_schemas.CompetitionListItem(
            **competition_schemas.CompetitionRead.model_validate(competition).model_dump(),
            organizer_name=organizer_name,
            participants_count=participants_count or 0,
        )
        for competition, organizer_name, participants_count in rows
    ]


def get_competition(db: Session, competition_id: int) -> Competition:
    competition = db.query(Competition).filter(Competition.id == competition_id).first()
    if not competition:
        raise errors.NotFoundError("Competition not found")
    return competition


def _ensure_can_manage(competition: Competition, actor: auth_schemas.TokenData, action: str) -> None:
    if actor.role != ADMIN and competition.organizer_id != actor.id:
        raise errors.ForbiddenError(f"You can only {action} your own competitions")


def create_competition(db: Session, competition: competition_schemas.CompetitionCreate, actor: auth_schemas.TokenData) -> Competition:
    data = competition.model_dump()
    db_competition = Competition(
        **data,
        organizer_id=actor.id,
    )
    db_competition.competition_type = data["competition_type"] or competition_model.DEFAULT_COMPETITION_TYPE
    db_competition.age_group = data["age_group"] or competition_model.DEFAULT_AGE_GROUP
    db_competition.description = data["description"] or ""
    db_competition.image_url = data["image_url"] or ""

    db.add(db_competition)
    db.commit()
    db.refresh(db_competition)
    logger.info("User %s created competition %s", actor.id, db_competition.id)
    return db_competition


def update_competition(db: Session, competition_id: int, competition_update: competition_schemas.CompetitionUpdate, actor: auth_schemas.TokenData) -> Competition:
    db_competition = get_competition(db, competition_id)
    _ensure_can_manage(db_competition, actor, "edit")

    update_data = competition_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        if value is None or (value == "" and key not in CLEARABLE_FIELDS):
            continue
        setattr(db_competition, key, value)

    db.commit()
    db.refresh(db_competition)
    return db_competition


def delete_competition(db: Session, competition_id: int, actor: auth_schemas.TokenData) -> bool:
    db_competition = get_competition(db, competition_id)
    _ensure_can_manage(db_competition, actor, "delete")

    # Registrations, matches (with their scores) and AI notes go with it
    db.delete(db_competition)
    db.commit()
    logger.info("User %s deleted competition %s", actor.id, competition_id)
    return True


def list_organizer_competitions(db: Session, actor: auth_schemas.TokenData) -> List[Competition]:
    query = db.query(Competition)
    if actor.role != ADMIN:
        query = query.filter(Competition.organizer_id == actor.id)
    return query.order_by(Competition.created_at.desc(), Competition.id.desc()).all()
