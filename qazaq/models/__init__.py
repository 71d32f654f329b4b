from qazaq.core.database import Base

# Import all models here to ensure they are registered with Base
from .user import User, Profile, UserRole
from .competition import Competition
from .registration import Registration
from .bonus_transaction import BonusTransaction
from .match import Match
from .score import Score
from .award import Award
from .ai_note import AiNote
from .organizer_service import OrganizerService

# Tables are created on application startup (see qazaq.main), not at import time,
# so tests can bind the metadata to their own engine.
