"""
Text-field edits: turn one edited field into a complete patch, and step
numeric field values from the keyboard or a label drag.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from . import config as c
from .converter import to_hex
from .numbers import clamp, round_alpha, round_half_up, to_finite_float
from .parser import parse_hex
from .schemas.responses import Color
from .validator import is_valid_hex_string

logger = logging.getLogger(__name__)


def _given(value: Any) -> bool:
    return value is not None and value != ""


def _pick(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return value if _given(value) else default


def field_edit_to_patch(
    data: Mapping[str, Any],
    current: Color,
    disable_alpha: bool = False,
) -> Optional[Dict[str, Any]]:
    """
    Merge an edit of one or more text fields with the current color.

    Returns a tagged patch ready for the picker, or None when the edit
    carries nothing usable (for example an invalid hex literal).
    """
    if _given(data.get("hex")):
        text = str(data["hex"]).strip()
        if not is_valid_hex_string(text):
            logger.debug(f"Ignoring invalid hex field value {text!r}")
            return None
        rgba = parse_hex(text)
        return {
            "kind": "hex",
            "hex": to_hex(rgba, with_alpha=not disable_alpha),
            "source": "hex",
        }

    if any(_given(data.get(key)) for key in ("r", "g", "b")):
        return {
            "kind": "rgb",
            "r": _pick(data, "r", current.rgb.r),
            "g": _pick(data, "g", current.rgb.g),
            "b": _pick(data, "b", current.rgb.b),
            "a": current.rgb.a,
            "source": "rgb",
        }

    if _given(data.get("a")):
        try:
            alpha = round_alpha(to_finite_float(data["a"]))
        except ValueError:
            logger.debug(f"Ignoring non-numeric alpha field value {data['a']!r}")
            return None
        return {
            "kind": "hsl",
            "h": current.hsl.h,
            "s": current.hsl.s,
            "l": current.hsl.l,
            "a": c.OPAQUE if disable_alpha else alpha,
            "source": "rgb",
        }

    if any(_given(data.get(key)) for key in ("h", "s", "l")):
        return {
            "kind": "hsl",
            "h": _pick(data, "h", current.hsl.h),
            "s": _pick(data, "s", current.hsl.s),
            "l": _pick(data, "l", current.hsl.l),
            "a": current.hsl.a,
            "source": "hsl",
        }

    return None


def step_field_value(value: Union[str, float], amount: float = c.DEFAULT_ARROW_OFFSET) -> Optional[Union[str, float]]:
    """
    Add ``amount`` to a field value, keeping a trailing '%' if it had one.

    Returns None when the text is not a number.
    """
    text = str(value)
    is_percentage = "%" in text
    try:
        number = to_finite_float(text.replace("%", ""))
    except ValueError:
        return None
    stepped = number + amount
    if is_percentage:
        return f"{stepped:g}%"
    return stepped


def drag_field_value(value: Union[str, float], movement_x: float, drag_max: float) -> Optional[int]:
    """Shift a field value by a horizontal drag; None once it leaves [0, drag_max]."""
    try:
        number = to_finite_float(value)
    except ValueError:
        return None
    new_value = int(round_half_up(number + movement_x))
    if new_value != clamp(new_value, 0, drag_max):
        return None
    return new_value
