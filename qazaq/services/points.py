"""
Point arithmetic shared by registration, scoring and the advisory endpoints.

All rounding goes through ``round_half_up`` so that x.5 always rounds up
(Python's built-in ``round`` would round half to even).
"""
import math

REGISTRATION_MIN_BONUS = 10
REGISTRATION_BONUS_RATE = 0.01
REGISTRATION_EXPERIENCE = 20

SCORE_FLAT_BONUS = 15

COLD_START_AVG_POINTS = 60
WIN_CHANCE_MIN = 5
WIN_CHANCE_MAX = 95


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def registration_bonus(entry_fee: int) -> int:
    """Bonus credited for a new registration: 1% of the fee, never less than 10."""
    return max(REGISTRATION_MIN_BONUS, round_half_up((entry_fee or 0) * REGISTRATION_BONUS_RATE))


def score_experience(points: int) -> int:
    return round_half_up(points / 2)


def win_chance(avg_points: float, experience: int) -> int:
    raw = round_half_up(avg_points * 0.7 + (experience or 0) * 0.03)
    return max(WIN_CHANCE_MIN, min(WIN_CHANCE_MAX, raw))
