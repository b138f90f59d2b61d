"""Decimal rounding helpers for bill amounts."""

from decimal import ROUND_HALF_UP, Decimal

FINE = Decimal("0.1")  # per-person amounts and tip
COARSE = Decimal("0.01")  # bill totals


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convert a number to Decimal without picking up binary float noise.

    Floats go through str() so 33.33 becomes Decimal("33.33") rather than
    Decimal("33.3299999999999982946974341757595539093017578125").

    Args:
        value: Amount as Decimal, int, float or numeric string

    Returns:
        Amount as Decimal
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_fine(value: Decimal) -> Decimal:
    """
    Round to the nearest 0.1.
    Uses ROUND_HALF_UP, which rounds halves away from zero.

    Args:
        value: Amount as Decimal

    Returns:
        Amount quantized to one decimal place
    """
    return to_decimal(value).quantize(FINE, rounding=ROUND_HALF_UP)


def round_coarse(value: Decimal) -> Decimal:
    """Round to the nearest 0.01, halves away from zero."""
    return to_decimal(value).quantize(COARSE, rounding=ROUND_HALF_UP)
