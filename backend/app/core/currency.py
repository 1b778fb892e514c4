"""
Naira amount helpers.
Normalizes user-entered amounts before they reach the tax calculators and
formats results for reports.

Parsing rule:
  - Every character outside ASCII 0-9 is discarded, so "₦50,000,000" -> 50000000.
  - Decimal points are discarded too; these fields have no kobo precision,
    so "1,500.50" -> 150050.
  - An empty or digit-free string parses to 0.
  - Anything that is not a finite number parses to 0; parsing never raises.
"""

import math
import re

NAIRA_SYMBOL = "₦"

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_amount(value: object) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        try:
            amount = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        digits = _NON_DIGITS.sub("", value)
        if not digits:
            return 0.0
        # float() has no digit limit; a huge figure becomes inf and is dropped below
        amount = float(digits)
    else:
        return 0.0

    if not math.isfinite(amount):
        return 0.0
    return max(amount, 0.0)


def format_amount(value: float, decimals: int = 0) -> str:
    return f"{value:,.{decimals}f}"


def format_naira(value: float, decimals: int = 2) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{NAIRA_SYMBOL}{format_amount(abs(value), decimals)}"
