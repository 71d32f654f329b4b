import datetime

import pytest

from qazaq.core import errors
from qazaq.models import AiNote, Award, Score, UserRole
from qazaq.schemas import user_schemas
from qazaq.services import registration_service, user_service


class TestProfile:

    def test_new_user_has_default_profile(self, db, make_user):
        user = make_user()

        profile = user_service.get_profile(db, user.id)

        assert profile.city == "Казахстан"
        assert profile.favorite_category == "Не выбрано"
        assert profile.awards_count == 0
        assert profile.matches_count == 0
        assert profile.recommendations == []

    def test_counts_and_latest_recommendations(self, db, make_user, make_competition, make_match):
        user = make_user()
        organizer = make_user(role=UserRole.ORGANIZER.value)
        competition = make_competition(organizer)
        match = make_match(competition)
        db.add(Award(user_id=user.id, title="Золото", place="1 место", year=2025))
        db.add(Score(match_id=match.id, participant_id=user.id, points=88))
        for day in range(1, 5):
            db.add(AiNote(user_id=user.id, competition_id=competition.id, advice=f"note {day}",
                          created_at=datetime.datetime(2026, 3, day)))
        db.commit()

        profile = user_service.get_profile(db, user.id)

        assert profile.awards_count == 1
        assert profile.matches_count == 1
        assert [r.advice for r in profile.recommendations] == ["note 4", "note 3", "note 2"]

    def test_update_trims_name_and_replaces_fields(self, db, make_user):
        user = make_user()

        updated = user_service.update_profile(
            db, user.id, user_schemas.ProfileUpdate(name="  Нурлан  ", phone="+7 700 000 00 00")
        )

        assert updated.name == "Нурлан"
        assert updated.phone == "+7 700 000 00 00"
        # Fields that were not sent are cleared
        assert updated.city == ""

    def test_short_name_rejected(self, db, make_user):
        user = make_user(name="Original")

        with pytest.raises(errors.ValidationError):
            user_service.update_profile(db, user.id, user_schemas.ProfileUpdate(name=" A "))

        db.expire_all()
        assert user_service.get_me(db, user.id).name == "Original"

    def test_empty_name_keeps_current(self, db, make_user):
        user = make_user(name="Original")

        updated = user_service.update_profile(db, user.id, user_schemas.ProfileUpdate(name="", city="Шымкент"))

        assert updated.name == "Original"
        assert updated.city == "Шымкент"


class TestHallOfFame:

    def test_awards_and_matches_newest_first(self, db, make_user, make_competition, make_match):
        user = make_user()
        organizer = make_user(role=UserRole.ORGANIZER.value)
        competition = make_competition(organizer)
        early = make_match(competition, title="Четвертьфинал", scheduled_at=datetime.datetime(2026, 5, 1))
        late = make_match(competition, title="Финал", scheduled_at=datetime.datetime(2026, 6, 1))
        db.add_all([
            Award(user_id=user.id, title="Бронза", year=2023),
            Award(user_id=user.id, title="Серебро", year=2025),
            Score(match_id=early.id, participant_id=user.id, points=70, comment="ok"),
            Score(match_id=late.id, participant_id=user.id, points=92, comment="great"),
        ])
        db.commit()

        hall = user_service.get_hall_of_fame(db, user.id)

        assert hall.profile.name == user.name
        assert [a.year for a in hall.awards] == [2025, 2023]
        assert [m.title for m in hall.matches] == ["Финал", "Четвертьфинал"]
        assert hall.matches[0].points == 92


class TestBonusSummary:

    def test_transactions_newest_first(self, db, make_user, make_competition):
        user = make_user()
        organizer = make_user(role=UserRole.ORGANIZER.value)
        first = make_competition(organizer, title="Первый", entry_fee=0)
        second = make_competition(organizer, title="Второй", entry_fee=4000)
        registration_service.register(db, first.id, user.id)
        registration_service.register(db, second.id, user.id)

        summary = user_service.get_bonus_summary(db, user.id)

        assert summary.profile.bonus_points == 50
        assert summary.profile.experience == 40
        assert [t.amount for t in summary.transactions] == [40, 10]

    def test_unknown_user(self, db):
        with pytest.raises(errors.NotFoundError):
            user_service.get_bonus_summary(db, 4242)
