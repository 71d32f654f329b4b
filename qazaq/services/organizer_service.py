import logging
from typing import List

from sqlalchemy.orm import Session

from qazaq.models import organizer_service as organizer_service_model

logger = logging.getLogger(__name__)

OrganizerService = organizer_service_model.OrganizerService

# Catalog rows written on first startup
DEFAULT_SERVICES = [
    {"title": "Онлайн-регистрация участников", "category": "Регистрация", "price": 15000,
     "description": "Форма записи, подтверждение по email и выгрузка списков."},
    {"title": "QR-чекин на площадке", "category": "Регистрация", "price": 25000,
     "description": "Проверка участников судьями по QR-коду."},
    {"title": "Судейская панель", "category": "Судейство", "price": 30000,
     "description": "Выставление баллов и комментариев в реальном времени."},
    {"title": "Прямая трансляция", "category": "Медиа", "price": 50000,
     "description": "Видеопоток матчей на странице соревнования."},
    {"title": "Продвижение в ленте", "category": "Маркетинг", "price": 20000,
     "description": "Показ соревнования в подборке на главной странице."},
]


def list_services(db: Session) -> List[OrganizerService]:
    return db.query(OrganizerService)\
        .order_by(OrganizerService.category.asc(), OrganizerService.price.asc())\
        .all()


def seed_services(db: Session) -> int:
    if db.query(OrganizerService).count():
        return 0
    db.add_all([OrganizerService(**service) for service in DEFAULT_SERVICES])
    db.commit()
    logger.info("Seeded %s organizer services", len(DEFAULT_SERVICES))
    return len(DEFAULT_SERVICES)
