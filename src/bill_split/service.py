"""Service layer that loads bills and runs the splitter.

Keeps file handling and configuration out of the pure splitting functions.
"""

import logging
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from .config import Settings
from .exceptions import InvalidBillError
from .models import Bill, BillSummary
from .splitter import split_bill

logger = logging.getLogger(__name__)


class BillSplitService:
    """Service for turning bill files into split summaries."""

    def __init__(self, settings: Settings):
        """Initialize the bill split service."""
        self.settings = settings

    def load_bill(self, path: Path) -> Bill:
        """
        Read and validate a JSON bill file.

        Args:
            path: Path to a JSON document shaped like Bill

        Returns:
            Validated bill

        Raises:
            InvalidBillError: If the file cannot be read or does not validate
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise InvalidBillError(f"Cannot read bill file {path}: {e}") from e

        try:
            bill = Bill.model_validate_json(raw)
        except ValidationError as e:
            raise InvalidBillError(f"Invalid bill in {path}:\n{e}") from e

        logger.info(f"Loaded bill from {path} with {len(bill.items)} items")

        return bill

    def resolve_tip_percentage(
        self, bill: Bill, tip_percentage: Decimal | None = None
    ) -> Decimal:
        """
        Pick the tip percentage to split with.

        Priority:
        1. Explicit tip_percentage argument
        2. The tip percentage written on the bill
        3. Configured default_tip_percentage
        4. The bill's default of zero
        """
        if tip_percentage is not None:
            return tip_percentage
        if "tip_percentage" in bill.model_fields_set:
            return bill.tip_percentage
        if self.settings.default_tip_percentage is not None:
            return self.settings.default_tip_percentage
        return bill.tip_percentage

    def summarize(
        self, bill: Bill, tip_percentage: Decimal | None = None
    ) -> BillSummary:
        """
        Split a bill, optionally overriding its tip percentage.

        Args:
            bill: Validated bill
            tip_percentage: Optional override in percent units

        Returns:
            The bill summary
        """
        tip = self.resolve_tip_percentage(bill, tip_percentage)
        if tip != bill.tip_percentage:
            logger.info(f"Overriding tip percentage {bill.tip_percentage} -> {tip}")
            bill = bill.model_copy(update={"tip_percentage": tip})

        summary = split_bill(bill)

        if not summary.items:
            logger.warning(
                f"Bill at {bill.location or 'unknown location'} has no personal "
                f"items; total {summary.total_amount} is not attributed to anyone"
            )

        logger.info(
            f"Split bill between {len(summary.items)} participants, "
            f"total: {summary.total_amount}"
        )

        return summary

    def split_file(
        self, path: Path, tip_percentage: Decimal | None = None
    ) -> BillSummary:
        """Load a bill file and split it."""
        return self.summarize(self.load_bill(path), tip_percentage)
