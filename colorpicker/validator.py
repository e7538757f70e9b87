"""
Cheap plausibility checks applied before an edit reaches the canonicalizer.
"""

import math
import re
from typing import Any, Mapping, Union

from .parser import HEX_RE

CHANNEL_KEYS = ("r", "g", "b", "a", "h", "s", "l", "v")
PERCENT_KEYS = ("s", "l")
PERCENT_RE = re.compile(r"[0-9]+%")


def _is_numeric(value: Any) -> bool:
    try:
        return not math.isnan(float(value))
    except (TypeError, ValueError, OverflowError):
        return False


def simple_check_for_valid_color(patch: Mapping[str, Any]) -> Union[Mapping[str, Any], bool]:
    """
    Return ``patch`` unchanged if every channel it sets looks like a number,
    otherwise False.

    Falsy values (0, "", None) count as absent, so they are never checked.
    ``s`` and ``l`` may also be whole-number percent strings such as "42%".
    Ranges are not checked.
    """
    checked = 0
    passed = 0
    for key in CHANNEL_KEYS:
        value = patch.get(key)
        if not value:
            continue
        checked += 1
        if _is_numeric(value):
            passed += 1
        elif key in PERCENT_KEYS and PERCENT_RE.fullmatch(str(value)):
            passed += 1
    return patch if checked == passed else False


is_plausible_color_patch = simple_check_for_valid_color


def is_valid_hex_string(hex: str) -> bool:
    """Strict check for a 3, 4, 6 or 8 digit hex literal, '#' optional."""
    if not isinstance(hex, str):
        return False
    return HEX_RE.match(hex.strip()) is not None
