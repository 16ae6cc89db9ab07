from deal_structure.domain.deal import INITIAL_VALUES, FieldId
from deal_structure.use_cases.compute_amount_financed import compute_amount_financed


def _deal(**overrides: str) -> dict[FieldId, str]:
    values = {
        FieldId.SALES_PRICE: "0.00",
        FieldId.DOWN_PAYMENT: "0.00",
        FieldId.WARRANTY: "0.00",
        FieldId.CPI: "0.00",
        FieldId.GAP: "0.00",
    }
    values.update({FieldId(key): value for key, value in overrides.items()})
    return values


def test_initial_deal_amount_financed() -> None:
    """27537.00 - 2500.00 + 0 + 0 + 0"""
    assert compute_amount_financed(INITIAL_VALUES) == "$25,037.00"


def test_adds_products_and_subtracts_down_payment() -> None:
    values = _deal(salesPrice="30000.00", downPayment="3000.00", warranty="500.00", gap="200.00")

    assert compute_amount_financed(values) == "$27,700.00"


def test_garbage_operands_count_as_zero() -> None:
    values = _deal(salesPrice="20000", downPayment="abc", warranty="", cpi=".")

    assert compute_amount_financed(values) == "$20,000.00"


def test_missing_operands_count_as_zero() -> None:
    assert compute_amount_financed({FieldId.SALES_PRICE: "15000"}) == "$15,000.00"


def test_formatted_operands_are_stripped() -> None:
    values = _deal(salesPrice="$12,000.50", downPayment="$1,000")

    assert compute_amount_financed(values) == "$11,000.50"


def test_negative_total_when_down_payment_exceeds_price() -> None:
    values = _deal(salesPrice="1000.00", downPayment="2234.50")

    assert compute_amount_financed(values) == "-$1,234.50"


def test_operands_are_parsed_to_the_cent() -> None:
    values = _deal(salesPrice="0.10", downPayment="0.00", warranty="0.20")

    assert compute_amount_financed(values) == "$0.30"
