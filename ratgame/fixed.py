"""Signed fixed-point arithmetic with 6 fractional bits."""

import math

FRACTION_BITS = 6
ONE = 1 << FRACTION_BITS

# Angles are expressed in 1/1024 of a full turn.
FULL_TURN = 1024


def fix16(value: float) -> int:
    """Convert a number to fixed point, truncating toward zero."""
    return int(value * ONE)


def fix16_to_int(value: int) -> int:
    """Integer part of a fixed-point value (rounds toward negative infinity)."""
    return value >> FRACTION_BITS


def fix16_mul(a: int, b: int) -> int:
    """Multiply two fixed-point values."""
    return (a * b) >> FRACTION_BITS


def sin_fix16(angle: int) -> int:
    """Sine of an angle given in 1/1024 turns, as a fixed-point value."""
    radians = 2 * math.pi * (angle % FULL_TURN) / FULL_TURN
    return round(math.sin(radians) * ONE)


def cos_fix16(angle: int) -> int:
    """Cosine of an angle given in 1/1024 turns, as a fixed-point value."""
    radians = 2 * math.pi * (angle % FULL_TURN) / FULL_TURN
    return round(math.cos(radians) * ONE)