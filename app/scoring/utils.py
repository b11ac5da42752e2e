"""Decimal utilities for score arithmetic.

Score calculations use Decimal so that 2-decimal rounding is done on the
decimal representation (ROUND_HALF_UP) rather than on binary floats.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

SCORE_PLACES = 2


def to_decimal(value: float, places: int = 4) -> Decimal:
    """Convert float to Decimal with explicit precision and ROUND_HALF_UP rounding.

    Args:
        value: Numeric value to convert.
        places: Number of decimal places to quantize to.

    Returns:
        Decimal with the specified precision.
    """
    if isinstance(value, Decimal):
        return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places,
        rounding=ROUND_HALF_UP,
    )


def round_score(value: Decimal) -> Decimal:
    """Round a score to 2 decimal places (half away from zero)."""
    return to_decimal(value, SCORE_PLACES)


def as_decimal(value) -> Decimal:
    """Exact Decimal for an int/float/Decimal input (no quantizing)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def mean(values: List[Decimal]) -> Decimal:
    """Arithmetic mean of a non-empty list of Decimals.

    Raises:
        ValueError: If values is empty.
    """
    if not values:
        raise ValueError("mean() requires at least one value")
    return sum(values, Decimal(0)) / Decimal(len(values))


def score_to_float(value: Optional[Decimal]) -> Optional[float]:
    """Convert an optional Decimal score to the float persisted on reports."""
    return None if value is None else float(value)


def drop_unscored(scores: Iterable[Optional[int]]) -> List[Decimal]:
    """Filter out null scores (unscored text answers) and convert to Decimal."""
    return [as_decimal(s) for s in scores if s is not None]
