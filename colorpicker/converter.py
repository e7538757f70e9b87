"""
Conversions between RGB, HSL and HSV, plus the string renderings the picker
shows in its text fields.

HSL <-> HSV goes straight between the two cylinders, never through RGB.
"""

from typing import Tuple

from . import config as c
from .numbers import clamp, round_alpha, round_half_up
from .schemas.responses import HSLA, HSVA, RGBA


# HSL <-> HSV -----------------------------------------------------

def hsl_to_hsv(h: float, s: float, l: float, a: float = c.OPAQUE) -> HSVA:
    """Convert HSL to HSV. Hue and alpha pass through."""
    v = l + s * min(l, 1 - l)
    sv = 0 if v == 0 else 2 * (1 - l / v)
    return HSVA(h=h, s=sv, v=v, a=a)


def hsv_to_hsl(h: float, s: float, v: float, a: float = c.OPAQUE) -> HSLA:
    """Convert HSV to HSL. Hue and alpha pass through."""
    l = v * (1 - s / 2)
    sl = 0 if l == 0 or l == 1 else (v - l) / min(l, 1 - l)
    return HSLA(h=h, s=sl, l=l, a=a)


# To RGB ----------------------------------------------------------

def _sector_to_rgb(h: float, chroma: float, m: float) -> Tuple[int, int, int]:
    """Place chroma in the 60 degree sector of h and lift every channel by m."""
    hp = (h % c.HUE_MAX) / c.HUE_SECTOR
    x = chroma * (1 - abs((hp % 2) - 1))

    if 0 <= hp < 1:
        r1, g1, b1 = chroma, x, 0
    elif 1 <= hp < 2:
        r1, g1, b1 = x, chroma, 0
    elif 2 <= hp < 3:
        r1, g1, b1 = 0, chroma, x
    elif 3 <= hp < 4:
        r1, g1, b1 = 0, x, chroma
    elif 4 <= hp < 5:
        r1, g1, b1 = x, 0, chroma
    else:
        r1, g1, b1 = chroma, 0, x

    return (
        _to_channel(r1 + m),
        _to_channel(g1 + m),
        _to_channel(b1 + m),
    )


def _to_channel(unit: float) -> int:
    return int(round_half_up(clamp(unit, 0.0, 1.0) * c.RGB_MAX))


def hsl_to_rgb(h: float, s: float, l: float, a: float = c.OPAQUE) -> RGBA:
    """Convert HSL to RGB. h in deg, s,l in [0,1]."""
    chroma = (1 - abs(2 * l - 1)) * s
    r, g, b = _sector_to_rgb(h, chroma, l - chroma / 2)
    return RGBA(r=r, g=g, b=b, a=a)


def hsv_to_rgb(h: float, s: float, v: float, a: float = c.OPAQUE) -> RGBA:
    """Convert HSV to RGB. h in deg, s,v in [0,1]."""
    chroma = v * s
    r, g, b = _sector_to_rgb(h, chroma, v - chroma)
    return RGBA(r=r, g=g, b=b, a=a)


# From RGB --------------------------------------------------------

def _unit_channels(r: int, g: int, b: int) -> Tuple[float, float, float, float, float]:
    R, G, B = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    return R, G, B, max_val, min_val


def _hue(R: float, G: float, B: float, max_val: float, d: float) -> float:
    if d == 0:
        return 0.0
    if max_val == R:
        h = c.HUE_SECTOR * (((G - B) / d) % 6)
    elif max_val == G:
        h = c.HUE_SECTOR * ((B - R) / d + 2)
    else:
        h = c.HUE_SECTOR * ((R - G) / d + 4)
    return h % c.HUE_MAX


def rgb_to_hsl(r: int, g: int, b: int, a: float = c.OPAQUE) -> HSLA:
    """Convert RGB to HSL."""
    R, G, B, max_val, min_val = _unit_channels(r, g, b)
    d = max_val - min_val
    l = (max_val + min_val) / 2
    s = 0 if d == 0 else d / (1 - abs(2 * l - 1))
    return HSLA(h=_hue(R, G, B, max_val, d), s=s, l=l, a=a)


def rgb_to_hsv(r: int, g: int, b: int, a: float = c.OPAQUE) -> HSVA:
    """Convert RGB to HSV."""
    R, G, B, max_val, min_val = _unit_channels(r, g, b)
    d = max_val - min_val
    s = 0 if max_val == 0 else d / max_val
    return HSVA(h=_hue(R, G, B, max_val, d), s=s, v=max_val, a=a)


# Hue memory ------------------------------------------------------

def preserve_hue(hsl: HSLA, hsv: HSVA, hue: float) -> Tuple[HSLA, HSVA]:
    """
    Replace the hue of both records with ``hue`` when either is achromatic.
    """
    if hsl.s == 0 or hsv.s == 0:
        return hsl.model_copy(update={"h": hue % c.HUE_MAX}), hsv.model_copy(update={"h": hue % c.HUE_MAX})
    return hsl, hsv


# Formatting ------------------------------------------------------

def _format_alpha(a: float) -> str:
    return f"{round_alpha(a):g}"


def _percent(x: float) -> int:
    return int(round_half_up(x * c.PERCENT))


def to_hex(rgba: RGBA, with_alpha: bool = True) -> str:
    """Convert RGBA to a lowercase hex string, 8 digits only when translucent."""
    def h(n: int) -> str:
        return format(n, "02x")

    base = f"#{h(rgba.r)}{h(rgba.g)}{h(rgba.b)}"
    if not with_alpha or rgba.a >= 1:
        return base
    return base + h(int(round_half_up(clamp(rgba.a, 0, 1) * c.RGB_MAX)))


def to_rgb_string(rgba: RGBA) -> str:
    if round_alpha(rgba.a) >= 1:
        return f"rgb({rgba.r}, {rgba.g}, {rgba.b})"
    return f"rgba({rgba.r}, {rgba.g}, {rgba.b}, {_format_alpha(rgba.a)})"


def to_hsl_string(hsl: HSLA) -> str:
    h, s, l = int(round_half_up(hsl.h)), _percent(hsl.s), _percent(hsl.l)
    if hsl.a >= 1:
        return f"hsl({h}, {s}%, {l}%)"
    return f"hsla({h}, {s}%, {l}%, {_format_alpha(hsl.a)})"


def to_hsv_string(hsv: HSVA) -> str:
    h, s, v = int(round_half_up(hsv.h)), _percent(hsv.s), _percent(hsv.v)
    if hsv.a >= 1:
        return f"hsv({h}, {s}%, {v}%)"
    return f"hsva({h}, {s}%, {v}%, {_format_alpha(hsv.a)})"
