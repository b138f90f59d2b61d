"""Custom exceptions for bill-split."""


class BillSplitError(Exception):
    """Base exception for all bill-split errors."""

    pass


class ConfigurationError(BillSplitError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidBillError(BillSplitError):
    """Raised when a bill cannot be split.

    Covers a zero subtotal with participants to allocate to, a participant
    count below one, and bill files that fail to load or validate.
    """

    pass


class DateFormatError(InvalidBillError):
    """Raised when a bill date is not in YYYY-MM-DD form."""

    def __init__(self, date_text: str, message: str | None = None):
        self.date_text = date_text
        super().__init__(
            message or f"Invalid bill date {date_text!r}: expected YYYY-MM-DD"
        )
