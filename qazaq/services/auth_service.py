import logging

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from qazaq.core import errors, security
from qazaq.core.config import settings
from qazaq.models import user as user_model
from qazaq.schemas import auth_schemas, user_schemas

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = {
    "city": "Казахстан",
    "favorite_category": "Не выбрано",
    "bio": "Новый профиль пользователя QazaqCompetition",
}

INVALID_CREDENTIALS = "Invalid email or password"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_role(role) -> str:
    if role in user_model.SELF_ASSIGNABLE_ROLES:
        return role
    return user_model.UserRole.PARTICIPANT.value


def get_user_by_email(db: Session, email: str):
    return db.query(user_model.User).filter(user_model.User.email == normalize_email(email)).first()


def get_user(db: Session, user_id: int):
    return db.query(user_model.User).filter(user_model.User.id == user_id).first()


def _auth_response(user: user_model.User) -> auth_schemas.AuthResponse:
    return auth_schemas.AuthResponse(
        token=security.create_user_token(user),
        user=user_schemas.UserRead.model_validate(user),
    )


def create_user(db: Session, name: str, email: str, password: str, role: str) -> user_model.User:
    """Insert a user and the default profile in one transaction."""
    db_user = user_model.User(
        name=name.strip(),
        email=normalize_email(email),
        password_hash=security.get_password_hash(password),
        role=role,
        bonus_points=0,
        experience=0,
    )
    db_user.profile = user_model.Profile(**DEFAULT_PROFILE)
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent sign-up for the same email
        db.rollback()
        raise errors.ConflictError("A user with this email already exists")
    db.refresh(db_user)
    return db_user


def register_user(db: Session, payload: auth_schemas.RegisterRequest) -> auth_schemas.AuthResponse:
    if not payload.name.strip():
        raise errors.ValidationError("Name, email and password are required")

    if get_user_by_email(db, payload.email):
        raise errors.ConflictError("A user with this email already exists")

    user = create_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=normalize_role(payload.role),
    )
    logger.info("Registered user %s with role %s", user.id, user.role)
    return _auth_response(user)


def authenticate_user(db: Session, payload: auth_schemas.LoginRequest) -> auth_schemas.AuthResponse:
    user = get_user_by_email(db, payload.email)
    if not user or not security.verify_password(payload.password, user.password_hash):
        raise errors.AuthError(INVALID_CREDENTIALS)
    return _auth_response(user)


def ensure_admin(db: Session) -> None:
    """Create the bootstrap admin from settings if it does not exist yet."""
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        return
    if get_user_by_email(db, settings.ADMIN_EMAIL):
        return
    admin = create_user(
        db,
        name=settings.ADMIN_NAME,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        role=user_model.UserRole.ADMIN.value,
    )
    logger.info("Created bootstrap admin %s", admin.email)


def get_current_user(token: str = Depends(security.oauth2_scheme)) -> auth_schemas.TokenData:
    """Resolve the bearer token to ``{id, role}``. No database round-trip."""
    return security.verify_token(token)


def role_required(*roles: str):
    allowed = {r.value if isinstance(r, user_model.UserRole) else r for r in roles}

    def checker(current_user: auth_schemas.TokenData = Depends(get_current_user)) -> auth_schemas.TokenData:
        if current_user.role not in allowed:
            raise errors.ForbiddenError("Not enough permissions for this action")
        return current_user

    return checker
