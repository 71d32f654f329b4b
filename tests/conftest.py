import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from qazaq.main import app
from qazaq.api.dependencies import get_db
from qazaq.core import security
from qazaq.core.database import Base, build_engine
from qazaq.models import Competition, Match, UserRole
from qazaq.services import auth_service


@pytest.fixture
def engine():
    # One shared in-memory connection so every session sees the same data
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(role=UserRole.PARTICIPANT.value, name=None, email=None, password="secret123"):
        counter["n"] += 1
        n = counter["n"]
        return auth_service.create_user(
            db,
            name=name or f"User {n}",
            email=email or f"user{n}@example.com",
            password=password,
            role=role,
        )

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {security.create_user_token(user)}"}

    return _auth_headers


@pytest.fixture
def make_competition(db):
    def _make_competition(organizer, **overrides):
        data = {
            "title": "Республиканская олимпиада",
            "city": "Алматы",
            "category": "Математика",
            "competition_type": "Олимпиада",
            "age_group": "16+",
            "format": "Офлайн",
            "start_date": datetime.date(2026, 11, 20),
            "entry_fee": 0,
            "description": "",
            "image_url": "",
        }
        data.update(overrides)
        competition = Competition(organizer_id=organizer.id, **data)
        db.add(competition)
        db.commit()
        db.refresh(competition)
        return competition

    return _make_competition


@pytest.fixture
def make_match(db):
    def _make_match(competition, judge=None, **overrides):
        data = {
            "title": "Финал",
            "scheduled_at": datetime.datetime(2026, 11, 20, 10, 0),
            "status": "scheduled",
            "video_url": "",
        }
        data.update(overrides)
        match = Match(competition_id=competition.id, judge_id=judge.id if judge else None, **data)
        db.add(match)
        db.commit()
        db.refresh(match)
        return match

    return _make_match
