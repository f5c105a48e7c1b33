import math

SCORE_MIN = 0
SCORE_MAX = 100


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 72.5 must become 73.
    return int(math.floor(value + 0.5))


def clamp_score(value: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def normalize_score(value: float) -> int:
    """Round half-up and clamp into [0, 100]."""
    return clamp_score(round_half_up(value))
