"""es-UY number formatting for dashboard values.

Grouping uses ``.`` and the decimal separator is ``,``. Rounding is half
away from zero on the decimal representation, so 0.05 rounds to 0.1.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

NOT_AVAILABLE = "N/D"
CURRENCY_PREFIX = "US$"


def is_number(value: Any) -> bool:
    """Finite int/float that is not a bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def round_half_up(value: float, digits: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-digits)
    number = Decimal(str(value))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction.
        ctx.prec = max(ctx.prec, number.adjusted() + digits + 2)
        return number.quantize(exponent, rounding=ROUND_HALF_UP)


def _group_thousands(digits: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ".".join(groups)


def format_number(value: Optional[float], fraction_digits: int = 1) -> str:
    """Format with at most ``fraction_digits`` decimals, trailing zeros dropped."""
    if not is_number(value):
        return NOT_AVAILABLE
    rounded = round_half_up(value, fraction_digits)
    integer_part, _, fraction_part = f"{abs(rounded):f}".partition(".")
    fraction_part = fraction_part.rstrip("0")
    text = _group_thousands(integer_part)
    if fraction_part:
        text = f"{text},{fraction_part}"
    if rounded < 0 and rounded != 0:
        text = f"-{text}"
    return text


def format_currency(value: Optional[float]) -> str:
    """Whole-dollar USD amount, e.g. ``US$ 25.000``."""
    if not is_number(value):
        return NOT_AVAILABLE
    text = format_number(abs(value), 0)
    sign = "-" if round_half_up(value, 0) < 0 else ""
    return f"{sign}{CURRENCY_PREFIX} {text}"


def format_fixed(value: float, digits: int = 1) -> str:
    """Fixed decimals with a ``.`` separator (percentage-point deltas)."""
    return f"{round_half_up(value, digits):f}"


def format_score(value: Optional[float]) -> str:
    if value is None:
        return NOT_AVAILABLE
    if not is_number(value):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return format_fixed(value, 2)
