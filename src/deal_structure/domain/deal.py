from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Mapping

from deal_structure.domain.currency import display_format
from deal_structure.domain.errors import ConflictError, ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class SaveRejectedError(ValidationError):
    """Raised by a field saver when the remote side refuses a value."""

    error_code: str = "SAVE_REJECTED"

    def __init__(self, field_id: FieldId, reason: str) -> None:
        self.field_id = field_id
        self.reason = reason
        super().__init__(reason, field_id=field_id.value)


class FieldBusyError(ConflictError):
    """Raised when a field receives input while its last value is still saving."""

    def __init__(self, field_id: FieldId) -> None:
        self.field_id = field_id
        super().__init__(
            f"Field '{field_id.value}' is still saving",
            field_id=field_id.value,
        )


# ==============================================================================
# Fields
# ==============================================================================


class FieldId(str, Enum):
    """Line items of a deal, in display order."""

    SALES_PRICE = "salesPrice"
    DOWN_PAYMENT = "downPayment"
    WARRANTY = "warranty"
    CPI = "cpi"
    GAP = "gap"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]


class FieldStatus(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SAVING = "saving"
    ERROR = "error"


FIELD_LABELS: dict[FieldId, str] = {
    FieldId.SALES_PRICE: "Sales Price",
    FieldId.DOWN_PAYMENT: "Down Payment",
    FieldId.WARRANTY: "+ Warranty",
    FieldId.CPI: "+ CPI",
    FieldId.GAP: "+ Gap on Contract",
}

INITIAL_VALUES: Mapping[FieldId, str] = {
    FieldId.SALES_PRICE: "27537.00",
    FieldId.DOWN_PAYMENT: "2500.00",
    FieldId.WARRANTY: "0.00",
    FieldId.CPI: "0.00",
    FieldId.GAP: "0.00",
}

MINIMUM_SALES_PRICE = Decimal("10000")


@dataclass(frozen=True, slots=True)
class Field:
    """
    Snapshot of one line item.

    `value` is the canonical string currently shown (possibly mid-edit or
    rejected); `committed_value` is the last value the saver accepted.
    """

    field_id: FieldId
    value: str
    committed_value: str
    status: FieldStatus = FieldStatus.IDLE
    snapshot_on_focus: str | None = None
    error_message: str | None = None

    @classmethod
    def initial(cls, field_id: FieldId, value: str) -> Field:
        return cls(field_id=field_id, value=value, committed_value=value)

    @property
    def label(self) -> str:
        return self.field_id.label

    @property
    def display_value(self) -> str:
        return f"${display_format(self.value)}"

    @property
    def is_saving(self) -> bool:
        return self.status is FieldStatus.SAVING

    @property
    def has_error(self) -> bool:
        return self.status is FieldStatus.ERROR


@dataclass(frozen=True, slots=True)
class FieldView:
    """What the presentation layer renders for one field."""

    field_id: FieldId
    label: str
    display_value: str
    is_saving: bool
    has_error: bool
    error_message: str | None = None

    @classmethod
    def of(cls, field: Field) -> FieldView:
        return cls(
            field_id=field.field_id,
            label=field.label,
            display_value=field.display_value,
            is_saving=field.is_saving,
            has_error=field.has_error,
            error_message=field.error_message,
        )


def validate_saved_value(field_id: FieldId, value: str) -> None:
    """
    Business rules the remote side applies before accepting a value.

    Raises:
        SaveRejectedError: If the value is not a number or the sales price
            is below the dealership minimum
    """
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise SaveRejectedError(field_id, "Invalid number") from None

    if not amount.is_finite():
        raise SaveRejectedError(field_id, "Invalid number")
    if field_id is FieldId.SALES_PRICE and amount < MINIMUM_SALES_PRICE:
        raise SaveRejectedError(field_id, "Sales price must be at least $10,000")
