"""Assorted utility helpers."""
from __future__ import annotations

import math
import re

MAX_NUMERIC_INPUT = 100_000_000.0
MIN_NUMERIC_INPUT = -1_000_000.0

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Form fields arrive as free text.  Empty strings, ``None``, anything
    ``float()`` rejects and non-finite values all collapse to ``default`` so
    the calculators never see NaN or infinity.
    """

    if x is None:
        return default
    if isinstance(x, str):
        x = x.strip()
        if not x:
            return default
    try:
        f = float(x)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(f):
        return default
    return f


def sanitize_numeric_input(value) -> str:
    """Strip a numeric text field down to something ``float()`` can read.

    Keeps digits, ``.`` and ``-``; extra decimal points are folded into the
    fractional part and parsed values are clamped to the supported range.
    """

    cleaned = _NON_NUMERIC.sub("", str(value or ""))
    parts = cleaned.split(".")
    if len(parts) > 2:
        cleaned = parts[0] + "." + "".join(parts[1:])
    try:
        num = float(cleaned)
    except ValueError:
        return cleaned
    if num > MAX_NUMERIC_INPUT:
        return "100000000"
    if num < MIN_NUMERIC_INPUT:
        return "-1000000"
    return cleaned


def format_currency(amount) -> str:
    """Whole-dollar USD formatting, e.g. ``-$1,250``."""
    v = round(nz(amount))
    sign = "-" if v < 0 else ""
    return f"{sign}${abs(v):,.0f}"


def format_percentage(value) -> str:
    return f"{nz(value):.2f}%"
