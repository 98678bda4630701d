"""
Numeric coercion helpers shared by the fouling calculators.

Upstream records arrive loosely typed; these helpers turn anything that
is not a finite number into a documented fallback instead of letting
NaN/Inf leak into results.
"""

import math
from typing import Any, Optional


def safe_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """Convert value to a finite float, replacing None/NaN/Inf/garbage with default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (ValueError, TypeError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return min(upper, max(lower, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding (2.5 -> 2); display scores
    and FR levels round 2.5 -> 3.
    """
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))
