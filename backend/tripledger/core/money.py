"""
Rounding and tolerance helpers shared by the balance and settlement engine.

Amounts are plain floats. Every comparison against zero goes through
EPSILON, which matches the cent granularity used by round2.
"""
from decimal import Decimal, ROUND_HALF_UP

EPSILON = 0.01

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """
    Round to 2 decimal places, half away from zero.

    The float's shortest repr is rounded rather than its binary expansion,
    so round2(0.005) == 0.01 and round2(-2.675) == -2.68.
    """
    return float(Decimal(repr(float(value))).quantize(_CENT, rounding=ROUND_HALF_UP))


def is_credit(value: float) -> bool:
    """True when the balance is owed money beyond the tolerance."""
    return value > EPSILON


def is_debit(value: float) -> bool:
    """True when the balance owes money beyond the tolerance."""
    return value < -EPSILON


def is_settled(value: float) -> bool:
    return not is_credit(value) and not is_debit(value)


def to_cents(value: Decimal) -> Decimal:
    """Quantize a stored amount to cents, half away from zero, as Numeric(15, 2) keeps it."""
    return Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)
