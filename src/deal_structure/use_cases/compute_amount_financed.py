from __future__ import annotations

from typing import Mapping

from deal_structure.domain.currency import format_usd, parse_lenient
from deal_structure.domain.deal import FieldId


def compute_amount_financed(values: Mapping[FieldId, str]) -> str:
    """
    Amount financed = sales price - down payment + warranty + CPI + GAP.

    Each operand is parsed leniently: currency symbols and separators are
    stripped, garbage or missing values count as zero. Never raises.

    Returns:
        The total as en-US dollars, e.g. "$25,037.00"
    """

    def operand(field_id: FieldId):
        return parse_lenient(values.get(field_id, ""))

    total = (
        operand(FieldId.SALES_PRICE)
        - operand(FieldId.DOWN_PAYMENT)
        + operand(FieldId.WARRANTY)
        + operand(FieldId.CPI)
        + operand(FieldId.GAP)
    )
    return format_usd(total)
