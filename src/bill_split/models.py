"""Pydantic domain models for bill-split."""

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    PlainSerializer,
    Tag,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .rounding import to_decimal

# Money renders as a JSON number; Python-mode dumps keep the Decimal.
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


# ============================================================================
# Input Models
# ============================================================================


class SharedItem(BaseModel):
    """A line item split evenly between every participant."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["shared"] = "shared"
    price: Decimal = Field(ge=0)
    name: str = ""

    @field_validator("price", mode="before")
    @classmethod
    def _price_from_float(cls, value):
        return to_decimal(value) if isinstance(value, float) else value


class PersonalItem(BaseModel):
    """A line item owed entirely by one participant."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["personal"] = "personal"
    price: Decimal = Field(ge=0)
    name: str = ""
    person: str = ""  # empty: counted in the subtotal, owned by nobody

    @field_validator("price", mode="before")
    @classmethod
    def _price_from_float(cls, value):
        return to_decimal(value) if isinstance(value, float) else value


def _item_kind(value: Any) -> str | None:
    """Pick the item variant, also accepting the isShared flag or a bare person."""
    if isinstance(value, dict):
        if "kind" in value:
            return value["kind"]
        if "isShared" in value:
            return "shared" if value["isShared"] else "personal"
        return "personal" if "person" in value else "shared"
    return getattr(value, "kind", None)


LineItem = Annotated[
    Annotated[SharedItem, Tag("shared")] | Annotated[PersonalItem, Tag("personal")],
    Discriminator(_item_kind),
]


class Bill(BaseModel):
    """A bill to split.

    Accepts both snake_case and camelCase keys, so the JSON shape
    {"date", "location", "tipPercentage", "items"} validates directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    date: str  # YYYY-MM-DD
    location: str = ""
    tip_percentage: Decimal = Decimal("0")
    items: list[LineItem] = Field(default_factory=list)

    @field_validator("tip_percentage", mode="before")
    @classmethod
    def _tip_from_float(cls, value):
        return to_decimal(value) if isinstance(value, float) else value


# ============================================================================
# Output Models
# ============================================================================


class ParticipantAmount(BaseModel):
    """Amount owed by one participant."""

    name: str
    amount: Money


class BillSummary(BaseModel):
    """Result of splitting a bill."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: str  # formatted, e.g. 2024年3月15日
    location: str
    sub_total: Money
    tip: Money
    total_amount: Money
    items: list[ParticipantAmount] = Field(default_factory=list)

    @property
    def allocated_amount(self) -> Decimal:
        """Sum of every participant's amount."""
        return sum((item.amount for item in self.items), Decimal("0"))

    @property
    def is_balanced(self) -> bool:
        """True when participant amounts add up to the total."""
        return self.allocated_amount == self.total_amount

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize with camelCase keys (subTotal, totalAmount)."""
        return self.model_dump_json(by_alias=True, indent=indent)
