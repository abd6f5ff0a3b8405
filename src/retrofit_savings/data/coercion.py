"""Coercion of raw form input into engine-ready numbers.

The engine never sees malformed input: anything that cannot be read as a
number becomes 0.0 here.  Locale-formatted values use a dot as the
thousands separator and a comma as the decimal separator, e.g.
``"1.587,92"`` for 1587.92.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

# Leading numeric prefix, the way a lenient float parser reads "12abc" as 12.
_NUMERIC_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def coerce_float(value: Any) -> float:
    """Read *value* as a plain float, falling back to 0.0.

    Strings are parsed from their leading numeric prefix, so ``"3.5 m"``
    gives 3.5 and ``"abc"`` gives 0.0.  NaN and infinities also become 0.0.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.strip())
        if match is None:
            logger.debug("Could not read %r as a number; using 0", value)
            return 0.0
        number = float(match.group(0))
    else:
        logger.debug("Unsupported input type %s; using 0", type(value).__name__)
        return 0.0

    if not math.isfinite(number):
        return 0.0
    return number


def parse_localized_number(value: Any) -> float:
    """Parse a dot-grouped, comma-decimal number such as ``"150.000.000"``.

    Non-string values go through :func:`coerce_float` unchanged.
    """
    if not isinstance(value, str):
        return coerce_float(value)
    normalized = value.strip().replace(".", "").replace(",", ".", 1)
    return coerce_float(normalized)


def coerce_int(value: Any) -> int:
    """Read *value* as an integer count, truncating any fraction."""
    return int(coerce_float(value))
