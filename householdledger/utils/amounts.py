"""Mini README: Won amount formatting and lenient parsing of form input.

Amounts are shown as whole won with comma thousands separators, rounding
halves away from zero. Input parsing accepts the same formatted text back,
ignores currency symbols and unit suffixes, and falls back to zero for blank
or unreadable values, matching how the entry forms behave.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import math
import re
from typing import Optional, Union

_NON_NUMERIC = re.compile(r"[^\d.]")


def _to_number(text: str) -> Optional[float]:
    try:
        number = float(extract_numbers(text))
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def format_amount(value: Optional[Union[int, float, str]]) -> str:
    """Render ``value`` as whole won, e.g. ``1234567.5 -> "1,234,568"``.

    Returns an empty string for ``None``, blank or unreadable text, and
    non-finite numbers.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        number = _to_number(value)
        if number is None:
            return ""
        value = number
    if not math.isfinite(value):
        return ""
    whole = int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return f"{whole:,}"


def parse_amount_input(text: Optional[str]) -> float:
    """Convert formatted text such as ``"₩1,200원"`` into a number, else zero."""

    if not text:
        return 0.0
    number = _to_number(text)
    return 0.0 if number is None else number


def extract_numbers(text: str) -> str:
    """Keep only digits and decimal points."""

    return _NON_NUMERIC.sub("", text)
