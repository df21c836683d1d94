"""Coercion of raw field input.

Whatever the input surface sends for a number (typed text, pasted currency, a
number), the result is a finite Decimal and garbage becomes 0. Checkbox values
accept the usual true/false words and reject anything else.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
# Longest leading number: "1.2.3" -> "1.2", "12-3" -> "12"
_LEADING_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def coerce_number(raw: Any) -> Decimal:
    """Parse a raw field value, defaulting to 0."""
    if isinstance(raw, bool):
        return ZERO
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else ZERO
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        return Decimal(str(raw)) if math.isfinite(raw) else ZERO

    text = _NON_NUMERIC.sub("", str(raw))
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return ZERO
    try:
        value = Decimal(match.group())
    except InvalidOperation:
        return ZERO
    # Drop the sign on -0
    return value if value != 0 else ZERO


FLAG_WORDS = {
    "true": True, "yes": True, "on": True, "1": True,
    "false": False, "no": False, "off": False, "0": False, "": False,
}


def coerce_flag(raw: Any) -> bool:
    """Parse a raw checkbox value. Raises ValueError for anything that is not a flag."""
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    if isinstance(raw, (int, float, Decimal)) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str) and raw.strip().lower() in FLAG_WORDS:
        return FLAG_WORDS[raw.strip().lower()]
    raise ValueError(f"Expected a true/false value, got {raw!r}")
