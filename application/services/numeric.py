"""Lenient parsing of numeric values found in upstream payloads."""
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional


def parse_number(value: Any, percent: bool = False) -> Optional[float]:
    """
    Finite float for numbers and numeric strings, else None.

    Blank strings, booleans and NaN/inf are not numbers. With ``percent``
    a trailing ``%`` is stripped first.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if percent and text.endswith("%"):
            text = text[:-1].strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def as_count(value: Any) -> float:
    """Counting-field value: unparseable contributes zero."""
    number = parse_number(value)
    return number if number is not None else 0.0


def tidy(value: float) -> Any:
    """Integral floats as int so sums print as ``15`` rather than ``15.0``."""
    return int(value) if float(value).is_integer() else value


def ratio(value: float) -> float:
    """Two decimals, exact ties rounded away from zero (``1.125`` → ``1.13``)."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
