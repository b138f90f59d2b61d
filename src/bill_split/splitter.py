"""Core bill splitting logic.

Personal items go to their owner, shared items are divided evenly, and the
tip is distributed in proportion to each participant's pre-tip share. Every
function here is pure; `split_bill` composes them.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from .dates import format_date
from .exceptions import InvalidBillError
from .models import (
    Bill,
    BillSummary,
    LineItem,
    ParticipantAmount,
    PersonalItem,
    SharedItem,
)
from .reconciler import adjust_amounts
from .rounding import round_coarse, round_fine, to_decimal

logger = logging.getLogger(__name__)


def calculate_subtotal(items: Sequence[LineItem]) -> Decimal:
    """Sum every item's price, shared and personal alike. Not rounded."""
    return sum((item.price for item in items), Decimal("0"))


def calculate_tip(
    sub_total: Decimal | int | float, tip_percentage: Decimal | int | float
) -> Decimal:
    """
    Calculate the tip for a subtotal.

    Negative percentages are not rejected and give a negative tip.

    Args:
        sub_total: Bill subtotal
        tip_percentage: Tip in percent units (10 means 10%)

    Returns:
        Tip rounded to the nearest 0.1
    """
    tip = to_decimal(sub_total) * to_decimal(tip_percentage) / 100
    return round_fine(tip)


def scan_participants(items: Sequence[LineItem]) -> list[str]:
    """
    List the distinct people named on personal items.

    Order is first appearance. Shared items and personal items without a
    person are skipped.
    """
    names: dict[str, None] = {}
    for item in items:
        if isinstance(item, PersonalItem) and item.person:
            names.setdefault(item.person)
    return list(names)


def calculate_person_amount(
    items: Sequence[LineItem],
    tip_percentage: Decimal,
    name: str,
    persons: int,
) -> Decimal:
    """
    Compute one participant's unrounded share of the bill.

    Steps:
    1. Sum the participant's personal items
    2. Add an equal 1/persons fraction of all shared items
    3. Add the tip scaled by that pre-tip amount over the subtotal

    Subtotal and tip are recomputed from the items on every call.

    Args:
        items: Every line item on the bill
        tip_percentage: Tip in percent units
        name: Participant to compute for
        persons: Number of participants sharing the shared items

    Returns:
        Pre-tip share plus proportional tip, unrounded

    Raises:
        InvalidBillError: If persons < 1 or the subtotal is zero
    """
    if persons < 1:
        raise InvalidBillError(f"Cannot split a bill between {persons} participants")

    personal_total = Decimal("0")
    shared_total = Decimal("0")

    for item in items:
        if isinstance(item, SharedItem):
            shared_total += item.price
        elif item.person == name:
            personal_total += item.price

    amount = personal_total + shared_total / persons

    sub_total = calculate_subtotal(items)
    if sub_total == 0:
        raise InvalidBillError(
            f"Cannot allocate tip for {name}: bill subtotal is zero"
        )
    tip = calculate_tip(sub_total, tip_percentage)

    # Tip is proportional to the pre-tip share, not split evenly
    amount += (amount / sub_total) * tip

    return amount


def split_bill(bill: Bill) -> BillSummary:
    """
    Split a bill between the participants named on its personal items.

    Each participant's amount is rounded to 0.1, then any rounding drift
    against the total is absorbed by the first participant. Subtotal, tip and
    total are rounded to 0.01.

    Args:
        bill: Validated bill

    Returns:
        Summary with formatted date, totals and per-participant amounts

    Raises:
        DateFormatError: If the bill date is not YYYY-MM-DD
        InvalidBillError: If there are participants but the subtotal is zero
    """
    date = format_date(bill.date)
    sub_total = calculate_subtotal(bill.items)
    tip = calculate_tip(sub_total, bill.tip_percentage)
    total_amount = sub_total + tip

    names = scan_participants(bill.items)
    persons = len(names)

    items = [
        ParticipantAmount(
            name=name,
            amount=round_fine(
                calculate_person_amount(
                    items=bill.items,
                    tip_percentage=bill.tip_percentage,
                    name=name,
                    persons=persons,
                )
            ),
        )
        for name in names
    ]

    adjust_amounts(round_coarse(total_amount), items)

    logger.debug(
        f"Split bill dated {bill.date} between {persons} participants, "
        f"total: {total_amount}"
    )

    return BillSummary(
        date=date,
        location=bill.location,
        sub_total=round_coarse(sub_total),
        tip=round_coarse(tip),
        total_amount=round_coarse(total_amount),
        items=items,
    )
