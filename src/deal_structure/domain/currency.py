"""Currency codec for deal amounts.

Converts between three representations of a money amount:

- raw text as typed by the user (may contain "$", commas, spaces, ...)
- the canonical decimal string stored on a field ("1234.5", "0.00", "12.")
- the display string shown in the input ("1,234.5")

Parsing is lenient on purpose: anything that does not look like a number
becomes zero. Nothing in this module raises.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.]")
# Leading numeric prefix, the way a float parser reads "12.5abc" as 12.5
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+))")
# Position between digits that is followed by whole groups of three digits
_THOUSANDS_BOUNDARY = re.compile(r"\B(?=(\d{3})+(?!\d))")

MAX_FRACTION_DIGITS = 2
ZERO = Decimal("0")
CENTS = Decimal("0.01")


def sanitize(raw: Any) -> str:
    """
    Reduce raw user input to a canonical decimal string.

    - Keeps only digits and "."
    - The first "." is the decimal point; later ones are dropped and the
      digit runs after them merged into the fraction
    - The fraction is truncated (never rounded) to two digits

    >>> sanitize("$1,234.567")
    '1234.56'
    >>> sanitize("1.2.3")
    '1.23'
    """
    if not isinstance(raw, str):
        return ""

    numeric = _NON_NUMERIC.sub("", raw)
    integer, point, fraction = numeric.partition(".")
    if not point:
        return integer

    fraction = fraction.replace(".", "")[:MAX_FRACTION_DIGITS]
    return f"{integer}.{fraction}"


def display_format(canonical: Any) -> Any:
    """
    Insert thousands separators into the integer part of a canonical value.

    The fractional part is kept exactly as given, including a bare trailing
    point while the user is still typing. Empty or non-string input is
    returned unchanged.
    """
    if not isinstance(canonical, str) or canonical == "":
        return canonical

    integer, point, fraction = canonical.partition(".")
    grouped = _THOUSANDS_BOUNDARY.sub(",", integer)
    return f"{grouped}{point}{fraction}"


def parse_amount(text: Any) -> Decimal:
    """Parse the leading number in `text`; unparsable or empty input is zero."""
    match = _NUMERIC_PREFIX.match(str(text)) if text is not None else None
    if match is None:
        return ZERO

    amount = Decimal(match.group(1))
    # Normalize -0 so it never renders as "-0.00"
    return amount if amount else ZERO


def parse_lenient(text: Any) -> Decimal:
    """Strip everything but digits and "." before parsing, e.g. "$1,000" -> 1000."""
    return parse_amount(_NON_NUMERIC.sub("", str(text)))


def commit_format(canonical: Any) -> str:
    """
    Format a canonical value with exactly two fractional digits, never grouped.

    This is the only place amounts are rounded to cents. Rounding is decimal
    half up, not binary float: "1.005" commits as "1.01" rather than "1.00".
    Sanitized input never carries more than two fractional digits, so only
    direct calls can tell the difference.

    >>> commit_format("12.5")
    '12.50'
    >>> commit_format("")
    '0.00'
    """
    return f"{_round_cents(parse_amount(canonical)):f}"


def format_usd(amount: Decimal) -> str:
    """Render an amount as en-US dollars: "$27,700.00", "-$12.50"."""
    cents = _round_cents(amount)
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"


def _round_cents(amount: Decimal) -> Decimal:
    with localcontext() as ctx:
        # Enough precision for every integer digit plus the cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 1 + MAX_FRACTION_DIGITS)
        ctx.rounding = ROUND_HALF_UP
        return amount.quantize(CENTS)
