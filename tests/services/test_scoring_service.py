import pytest

from qazaq.core import errors
from qazaq.models import BonusTransaction, Registration, Score, User, UserRole
from qazaq.schemas import auth_schemas, judge_schemas
from qazaq.services import registration_service, scoring_service


@pytest.fixture
def organizer(make_user):
    return make_user(role=UserRole.ORGANIZER.value)


@pytest.fixture
def judge(make_user):
    return make_user(role=UserRole.JUDGE.value)


@pytest.fixture
def participant(make_user):
    return make_user(role=UserRole.PARTICIPANT.value, name="Айгерим", email="aigerim@example.com")


class TestSubmitScore:

    def test_score_rewards_participant_without_ledger_row(self, db, organizer, judge, participant, make_competition, make_match):
        match = make_match(make_competition(organizer), judge=judge)

        score = scoring_service.submit_score(
            db,
            judge_schemas.ScoreCreate(match_id=match.id, participant_id=participant.id, points=75, comment="Отлично"),
            judge_id=judge.id,
        )

        assert score.id is not None
        assert score.judge_id == judge.id
        db.expire_all()
        user = db.get(User, participant.id)
        assert user.experience == 38
        assert user.bonus_points == 15
        assert db.query(BonusTransaction).filter(BonusTransaction.user_id == participant.id).count() == 0

    def test_scores_accumulate(self, db, organizer, judge, participant, make_competition, make_match):
        match = make_match(make_competition(organizer), judge=judge)
        for value in (60, 90):
            scoring_service.submit_score(
                db,
                judge_schemas.ScoreCreate(match_id=match.id, participant_id=participant.id, points=value),
                judge_id=judge.id,
            )

        db.expire_all()
        user = db.get(User, participant.id)
        assert user.experience == 30 + 45
        assert user.bonus_points == 30
        assert db.query(Score).filter(Score.participant_id == participant.id).count() == 2

    def test_unknown_match(self, db, judge, participant):
        with pytest.raises(errors.NotFoundError):
            scoring_service.submit_score(
                db,
                judge_schemas.ScoreCreate(match_id=404, participant_id=participant.id, points=10),
                judge_id=judge.id,
            )

    def test_unknown_participant(self, db, organizer, judge, make_competition, make_match):
        match = make_match(make_competition(organizer), judge=judge)
        with pytest.raises(errors.NotFoundError):
            scoring_service.submit_score(
                db,
                judge_schemas.ScoreCreate(match_id=match.id, participant_id=404, points=10),
                judge_id=judge.id,
            )


class TestQrCheckIn:

    def test_check_in_is_idempotent(self, db, organizer, judge, participant, make_competition):
        competition = make_competition(organizer)
        registration_service.register(db, competition.id, participant.id)
        request = judge_schemas.QrCheckRequest(competition_id=competition.id, participant_email="AIGERIM@Example.com")

        first = scoring_service.qr_check_in(db, request, judge_id=judge.id)
        second = scoring_service.qr_check_in(db, request, judge_id=judge.id)

        assert first == second
        assert first.participant.name == "Айгерим"
        registrations = db.query(Registration).filter(Registration.user_id == participant.id).all()
        assert len(registrations) == 1
        assert registrations[0].checked_in is True

    def test_unknown_email(self, db, organizer, judge, make_competition):
        competition = make_competition(organizer)
        with pytest.raises(errors.NotFoundError):
            scoring_service.qr_check_in(
                db,
                judge_schemas.QrCheckRequest(competition_id=competition.id, participant_email="nobody@example.com"),
                judge_id=judge.id,
            )

    def test_participant_not_registered(self, db, organizer, judge, participant, make_competition):
        competition = make_competition(organizer)
        with pytest.raises(errors.NotFoundError):
            scoring_service.qr_check_in(
                db,
                judge_schemas.QrCheckRequest(competition_id=competition.id, participant_email=participant.email),
                judge_id=judge.id,
            )


class TestMatchListings:

    def test_judge_sees_only_assigned_matches(self, db, organizer, judge, participant, make_user, make_competition, make_match):
        other_judge = make_user(role=UserRole.JUDGE.value)
        competition = make_competition(organizer, title="Кубок")
        registration_service.register(db, competition.id, participant.id)
        mine = make_match(competition, judge=judge, title="Полуфинал")
        make_match(competition, judge=other_judge, title="Финал")

        rows = scoring_service.list_judge_matches(db, auth_schemas.TokenData(id=judge.id, role="judge"))

        assert [row.id for row in rows] == [mine.id]
        assert rows[0].competition_title == "Кубок"
        assert rows[0].participant_name == "Айгерим"

    def test_admin_sees_every_match(self, db, organizer, judge, make_user, make_competition, make_match):
        admin = make_user(role=UserRole.ADMIN.value)
        competition = make_competition(organizer)
        make_match(competition, judge=judge)
        make_match(competition, judge=None)

        rows = scoring_service.list_judge_matches(db, auth_schemas.TokenData(id=admin.id, role="admin"))

        assert len(rows) == 2
        assert all(row.user_id is None for row in rows)

    def test_live_matches_ordered_by_schedule(self, db, organizer, make_competition, make_match):
        import datetime
        competition = make_competition(organizer, city="Шымкент")
        late = make_match(competition, title="Late", scheduled_at=datetime.datetime(2026, 12, 1, 18, 0))
        early = make_match(competition, title="Early", scheduled_at=datetime.datetime(2026, 12, 1, 9, 0))

        live = scoring_service.list_live_matches(db)

        assert [m.id for m in live] == [early.id, late.id]
        assert live[0].city == "Шымкент"
