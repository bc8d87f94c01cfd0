from __future__ import annotations

import math
from typing import Optional


def currency(value: float) -> str:
    """Dollar amount with thousands separator and two decimals."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def whole_currency(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def percent(value: float) -> str:
    return f"{value:.2f}%"


def parse_number(text: Optional[str], default: float = 0.0) -> float:
    """Parse user-entered text into a float.

    Thousands separators and a leading dollar sign are accepted. Empty,
    malformed or non-finite input gives ``default``.
    """
    if text is None:
        return default
    cleaned = str(text).strip().replace(",", "").lstrip("$")
    try:
        value = float(cleaned)
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value
