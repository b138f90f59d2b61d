"""Rounding reconciliation for per-participant amounts."""

import logging
from decimal import Decimal

from .models import ParticipantAmount
from .rounding import round_fine

logger = logging.getLogger(__name__)

# Residuals at or below one cent are rounding noise, not drift.
ADJUSTMENT_THRESHOLD = Decimal("0.01")


def compute_residual(
    total_amount: Decimal, items: list[ParticipantAmount]
) -> Decimal:
    """
    Compute the rounding drift between the bill total and the rounded amounts.

    Args:
        total_amount: Coarse-rounded grand total
        items: Fine-rounded participant amounts

    Returns:
        total_amount - sum(amounts), rounded to the nearest 0.1
    """
    allocated = sum((item.amount for item in items), Decimal("0"))
    return round_fine(total_amount - allocated)


def adjust_amounts(
    total_amount: Decimal, items: list[ParticipantAmount]
) -> list[ParticipantAmount]:
    """
    Absorb rounding drift into the first participant.

    Steps:
    1. Compute residual = round_fine(total_amount - sum(amounts))
    2. If |residual| > 0.01, add it to the first participant's amount
    3. Re-round that one amount to 0.1

    Nobody but the first participant is touched. An empty list is left as is.

    Args:
        total_amount: Coarse-rounded grand total
        items: Fine-rounded participant amounts, in scan order (mutated)

    Returns:
        The same list, adjusted in place
    """
    if not items:
        return items

    residual = compute_residual(total_amount, items)

    if abs(residual) > ADJUSTMENT_THRESHOLD:
        first = items[0]
        first.amount = round_fine(first.amount + residual)

        logger.info(f"Applied rounding adjustment: {residual} to {first.name}")

    return items
