import pytest

from qazaq.services import points


class TestRoundHalfUp:

    @pytest.mark.parametrize("value, expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.4999, 2),
        (-0.5, 0),
        (42.0, 42),
    ])
    def test_ties_round_up(self, value, expected):
        assert points.round_half_up(value) == expected


class TestRegistrationBonus:

    def test_minimum_bonus_applies_to_small_fees(self):
        assert points.registration_bonus(500) == 10

    def test_one_percent_of_large_fees(self):
        assert points.registration_bonus(5000) == 50

    def test_free_competition_still_earns_minimum(self):
        assert points.registration_bonus(0) == 10

    def test_fee_of_1000_earns_minimum(self):
        assert points.registration_bonus(1000) == 10

    def test_half_point_rounds_up(self):
        # 1% of 1550 is 15.5
        assert points.registration_bonus(1550) == 16


class TestScoreExperience:

    def test_half_of_points(self):
        assert points.score_experience(80) == 40

    def test_odd_points_round_up(self):
        assert points.score_experience(75) == 38


class TestWinChance:

    def test_cold_start(self):
        assert points.win_chance(points.COLD_START_AVG_POINTS, 0) == 42

    def test_clamped_to_maximum(self):
        # 100 * 0.7 + 10000 * 0.03 = 370
        assert points.win_chance(100, 10000) == 95

    def test_clamped_to_minimum(self):
        assert points.win_chance(0, 0) == 5

    @pytest.mark.parametrize("avg_points, experience", [
        (0, 0), (1, 1), (60, 20), (100, 500), (250, 99999), (5, 0),
    ])
    def test_always_within_bounds(self, avg_points, experience):
        assert 5 <= points.win_chance(avg_points, experience) <= 95
