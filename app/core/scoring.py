"""Numeric helpers shared by the evaluation pipeline.

Upstream deltas arrive as loosely typed JSON, so everything funnels through
``coerce_int`` before being perturbed and clamped.
"""
import math
import random
from typing import Any


DELTA_LIMIT = 20 # learning / likability, per round
STUDENTS_LIMIT = 10
NOISE_SPREAD = 2

CATASTROPHIC_LEARNING_DELTA = -25
CATASTROPHIC_LIKABILITY_DELTA = -35
CATASTROPHIC_MIN_STUDENTS_LOST = 5
CATASTROPHIC_CLASS_SHARE = 0.4


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


def add_noise(value: int, spread: int = NOISE_SPREAD, rng: random.Random = random) -> int:
    """Shift value by a uniform integer in [-spread, +spread]"""
    return value + rng.randint(-spread, spread)


def signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def coerce_int(value: Any, default: int = 0) -> int:
    """Best effort int from upstream JSON (ints, floats, numeric strings)"""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        return round_half_up(value)
    return default


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def catastrophic_students_loss(class_size: int) -> int:
    return max(CATASTROPHIC_MIN_STUDENTS_LOST, round_half_up(class_size * CATASTROPHIC_CLASS_SHARE))
