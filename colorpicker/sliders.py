"""
Reduce pointer offsets inside a slider track to channel patches.

Offsets are measured from the track's top-left corner in the same unit as
its width and height. Each function returns None when the position maps to
the value the picker already shows.
"""

from typing import Any, Dict, Literal, Optional

from . import config as c
from .numbers import clamp, round_half_up
from .schemas.responses import HSLA

Direction = Literal["horizontal", "vertical"]


def hue_patch(
    hsl: HSLA,
    left: float,
    top: float,
    width: float,
    height: float,
    direction: Direction = "horizontal",
) -> Optional[Dict[str, Any]]:
    """Hue slider: 0 at the left (or bottom) end, 359 past the far end."""
    if direction == "vertical":
        if top < 0:
            h = c.HUE_SLIDER_MAX
        elif top > height:
            h = 0
        else:
            h = c.HUE_MAX * (1 - top / height)
    else:
        if left < 0:
            h = 0
        elif left > width:
            h = c.HUE_SLIDER_MAX
        else:
            h = c.HUE_MAX * left / width

    if hsl.h == h:
        return None
    return {"kind": "hsl", "h": h, "s": hsl.s, "l": hsl.l, "a": hsl.a, "source": "rgb"}


def alpha_patch(
    hsl: HSLA,
    left: float,
    top: float,
    width: float,
    height: float,
    direction: Direction = "horizontal",
) -> Optional[Dict[str, Any]]:
    """Alpha slider: transparent at the left (or top) end, in hundredths."""
    offset, length = (top, height) if direction == "vertical" else (left, width)
    if offset < 0:
        a = 0.0
    elif offset > length:
        a = c.OPAQUE
    else:
        a = round_half_up(offset * c.PERCENT / length) / c.PERCENT

    if hsl.a == a:
        return None
    return {"kind": "hsl", "h": hsl.h, "s": hsl.s, "l": hsl.l, "a": a, "source": "rgb"}


def saturation_patch(
    hsl: HSLA,
    left: float,
    top: float,
    width: float,
    height: float,
) -> Dict[str, Any]:
    """Saturation area: HSV saturation grows to the right, value grows upward."""
    left = clamp(left, 0, width)
    top = clamp(top, 0, height)
    saturation = left / width
    bright = clamp(1 - top / height, 0.0, 1.0)
    return {"kind": "hsv", "h": hsl.h, "s": saturation, "v": bright, "a": hsl.a, "source": "hsva"}
