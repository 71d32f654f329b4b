"""
Canned "AI" helpers: preparation advice, win chances, the pairing draw and a
weakness hint. Everything here is plain templating and arithmetic; no model is
called.
"""
import logging
import random
from typing import List, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from qazaq.core import errors
from qazaq.models import ai_note as ai_note_model
from qazaq.models import competition as competition_model
from qazaq.models import registration as registration_model
from qazaq.models import score as score_model
from qazaq.models import user as user_model
from qazaq.schemas import ai_schemas
from qazaq.services import points

logger = logging.getLogger(__name__)

BYE = "Проходит автоматически"

ADVICE_TEMPLATE = (
    "Подготовь 3 тренировочные сессии по категории {category}, "
    "симулируй финальный раунд и заранее проверь оборудование."
)
WEAKNESS_TEXT = "Риск: потеря очков из-за спешки в финальном этапе. Рекомендация: чеклист и тайм-блоки."

NO_DATA_ANALYSIS = "Недостаточно данных. Заверши хотя бы один матч для персонального AI-анализа."
LOW_SCORE_ANALYSIS = (
    "AI видит просадку в точности и стабильности. "
    "Добавь 2 контрольных тренировки на скорость принятия решений."
)
GOOD_SCORE_ANALYSIS = (
    "AI отмечает хороший уровень. "
    "Для роста до топ-результата усили защиту стратегии и работу под давлением."
)
LOW_SCORE_THRESHOLD = 70
DEFAULT_BASED_ON = "последнем выступлении"


def get_advice(db: Session, user_id: int, competition_id: int) -> ai_note_model.AiNote:
    """Return the cached note for (user, competition), generating and storing one on first call."""
    existing = db.query(ai_note_model.AiNote).filter(
        ai_note_model.AiNote.user_id == user_id,
        ai_note_model.AiNote.competition_id == competition_id,
    ).order_by(ai_note_model.AiNote.created_at.desc(), ai_note_model.AiNote.id.desc()).first()
    if existing:
        return existing

    competition = db.query(competition_model.Competition)\
        .filter(competition_model.Competition.id == competition_id)\
        .first()
    if not competition:
        raise errors.NotFoundError("Competition not found")

    note = ai_note_model.AiNote(
        user_id=user_id,
        competition_id=competition_id,
        advice=ADVICE_TEMPLATE.format(category=competition.category),
        weakness=WEAKNESS_TEXT,
    )
    db.add(note)
    db.commit()
    db.refresh(note)
    return note


def get_win_chances(db: Session, competition_id: int) -> List[ai_schemas.WinChance]:
    avg_points = func.coalesce(func.avg(score_model.Score.points), points.COLD_START_AVG_POINTS)
    rows = db.query(
        user_model.User.id,
        user_model.User.name,
        user_model.User.experience,
        avg_points.label("avg_points"),
    ).join(registration_model.Registration, registration_model.Registration.user_id == user_model.User.id)\
        .outerjoin(score_model.Score, score_model.Score.participant_id == user_model.User.id)\
        .filter(registration_model.Registration.competition_id == competition_id)\
        .group_by(user_model.User.id, user_model.User.name, user_model.User.experience)\
        .all()

    chances = [
        ai_schemas.WinChance(
            participant=row.name,
            win_chance=points.win_chance(float(row.avg_points), row.experience),
        )
        for row in rows
    ]
    chances.sort(key=lambda c: c.win_chance, reverse=True)
    return chances


def pair_participants(names: Sequence[str], rng: random.Random = None) -> List[List[str]]:
    """
    Shuffle ``names`` (Fisher-Yates via ``random.shuffle``) and pair them off.

    With an odd count the last name gets a bye.
    """
    shuffled = list(names)
    (rng or random).shuffle(shuffled)

    pairs = []
    for i in range(0, len(shuffled), 2):
        if i + 1 < len(shuffled):
            pairs.append([shuffled[i], shuffled[i + 1]])
        else:
            pairs.append([shuffled[i], BYE])
    return pairs


def draw_pairs(db: Session, competition_id: int) -> List[List[str]]:
    participants = db.query(user_model.User.id, user_model.User.name)\
        .join(registration_model.Registration, registration_model.Registration.user_id == user_model.User.id)\
        .filter(registration_model.Registration.competition_id == competition_id)\
        .order_by(user_model.User.id.asc())\
        .all()

    if len(participants) < 2:
        raise errors.ValidationError("At least 2 participants are needed for a draw")

    pairs = pair_participants([p.name for p in participants])
    logger.info("Drew %s pairs for competition %s", len(pairs), competition_id)
    return pairs


def analyze_weakness(db: Session, user_id: int) -> ai_schemas.WeaknessAnalysis:
    latest = db.query(score_model.Score)\
        .filter(score_model.Score.participant_id == user_id)\
        .order_by(score_model.Score.created_at.desc(), score_model.Score.id.desc())\
        .first()

    if not latest:
        return ai_schemas.WeaknessAnalysis(analysis=NO_DATA_ANALYSIS)

    analysis = LOW_SCORE_ANALYSIS if latest.points < LOW_SCORE_THRESHOLD else GOOD_SCORE_ANALYSIS
    return ai_schemas.WeaknessAnalysis(analysis=analysis, based_on=latest.comment or DEFAULT_BASED_ON)
