"""bill-split - Split a shared bill with proportional tip allocation."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .dates import format_date
from .exceptions import (
    BillSplitError,
    ConfigurationError,
    DateFormatError,
    InvalidBillError,
)
from .models import (
    Bill,
    BillSummary,
    LineItem,
    ParticipantAmount,
    PersonalItem,
    SharedItem,
)
from .reconciler import adjust_amounts, compute_residual
from .rounding import round_coarse, round_fine
from .service import BillSplitService
from .splitter import (
    calculate_person_amount,
    calculate_subtotal,
    calculate_tip,
    scan_participants,
    split_bill,
)

__all__ = [
    "Settings",
    "load_settings",
    "format_date",
    "BillSplitError",
    "ConfigurationError",
    "DateFormatError",
    "InvalidBillError",
    "Bill",
    "BillSummary",
    "LineItem",
    "ParticipantAmount",
    "PersonalItem",
    "SharedItem",
    "adjust_amounts",
    "compute_residual",
    "round_coarse",
    "round_fine",
    "BillSplitService",
    "calculate_person_amount",
    "calculate_subtotal",
    "calculate_tip",
    "scan_participants",
    "split_bill",
]
