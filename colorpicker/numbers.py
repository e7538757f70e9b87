"""
Numeric helpers for channel clamping and rounding.
"""

import math

from . import config as c


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positive values, like Math.round."""
    scale = 10 ** ndigits
    return math.floor(x * scale + 0.5) / scale


def round_alpha(a: float) -> float:
    """Clamp alpha into [0, 1] and round it to hundredths."""
    return round_half_up(clamp(a, 0.0, c.OPAQUE), c.ALPHA_DECIMALS)


def to_finite_float(value) -> float:
    """Coerce a number or numeric string to float, rejecting NaN and infinities."""
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, OverflowError) as exc:
        raise ValueError(f"not a number: {value!r}") from exc
    if not math.isfinite(number):
        raise ValueError(f"non-finite value: {value!r}")
    return number


def to_fraction(value) -> float:
    """Read "42%" as 0.42; bare numbers above 1 are read as percents too."""
    if isinstance(value, str) and value.strip().endswith("%"):
        return to_finite_float(value.strip()[:-1]) / c.PERCENT
    number = to_finite_float(value)
    return number if number <= 1 else number / c.PERCENT
