import math
import re
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.,]")
_THOUSANDS_SEPARATOR = re.compile(r",(\d{3})")


def parse_price(value: Any) -> float:
    """Parse a price given as a number or a display string.

    Handles "$15.90", "15,90", "1,299.99" and "15.90 MAD". Falsy or
    unparsable input gives 0.0; the result is never negative.
    """
    if not value or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) and number > 0 else 0.0

    cleaned = _NON_NUMERIC.sub("", str(value))
    cleaned = _THOUSANDS_SEPARATOR.sub(r"\1", cleaned)
    cleaned = cleaned.replace(",", ".", 1)

    # Leading decimal number only; trailing junk such as a second dot is ignored
    match = re.match(r"\d*\.?\d+|\d+", cleaned)
    if not match:
        return 0.0
    try:
        return float(match.group(0))
    except ValueError:
        return 0.0
