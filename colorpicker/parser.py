"""
Parsing of raw picker input into validated color channels.

Supported strings: named, transparent, hex 3/4/6/8 (leading '#' optional),
rgb/rgba, hsl/hsla and hsv/hsva in comma, space or slash syntax.
Structured input is either an explicitly tagged patch (``kind`` of hex, rgb,
hsl or hsv) or a plain mapping whose keys decide its kind.
"""

import logging
import math
import re
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from . import config as c
from .converter import hsl_to_rgb, hsv_to_rgb
from .errors import InvalidColorError
from .names import NAMED
from .numbers import clamp, round_half_up, to_fraction
from .schemas.requests import HexInput, HslInput, HsvInput, RgbInput, color_input_adapter
from .schemas.responses import HSLA, HSVA, RGBA

logger = logging.getLogger(__name__)

ColorPatch = Union[HexInput, RgbInput, HslInput, HsvInput]
Channels = Union[RGBA, HSLA, HSVA]

# Regular expression patterns
ws = r"\s*"
num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
perc = f"{num}%"
angle = f"{num}(?:deg|grad|rad|turn)?"
slash = f"{ws}/{ws}"
sep = r"(?:\s*,\s*|\s+)"
channel = f"{num}%?"
alpha_tail = f"(?:(?:{slash}|{sep})({num}%?))?"


def angle_to_deg(s: str) -> float:
    """Convert angle string to degrees."""
    m = re.match(f"^({num})(deg|grad|rad|turn)?$", s, re.IGNORECASE)
    if not m:
        return 0
    v = float(m.group(1))
    unit = (m.group(2) or "deg").lower()
    if unit == "grad":
        return (v * 9) / 10
    elif unit == "rad":
        return (v * 180) / math.pi
    elif unit == "turn":
        return v * 360
    return v


def _alpha(token: Optional[str]) -> float:
    if token is None:
        return c.OPAQUE
    if token.endswith("%"):
        return clamp(float(token[:-1]) / c.PERCENT, 0.0, c.OPAQUE)
    return clamp(float(token), 0.0, c.OPAQUE)


# HEX -------------------------------------------------------------

HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)


def parse_hex(s: str) -> Optional[RGBA]:
    """Parse hex color string to RGBA."""
    m = HEX_RE.match(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) in [3, 4]:
        h = "".join(ch * 2 for ch in h)
    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    a = c.OPAQUE
    if len(h) == 8:
        a = int(h[6:8], 16) / c.RGB_MAX
    return RGBA(r=r, g=g, b=b, a=a)


# RGB -------------------------------------------------------------

RGB_RE = re.compile(
    f"^rgba?{ws}\\({ws}({channel}){sep}({channel}){sep}({channel}){alpha_tail}{ws}\\)$",
    re.IGNORECASE,
)


def parse_rgb(s: str) -> Optional[RGBA]:
    """Parse RGB/RGBA color string to RGBA."""
    m = RGB_RE.match(s)
    if not m:
        return None
    R, G, B, A = m.groups()

    def cv(t: str) -> int:
        if t.endswith("%"):
            return int(round_half_up(clamp(float(t[:-1]) * c.RGB_MAX / c.PERCENT, 0, c.RGB_MAX)))
        return int(round_half_up(clamp(float(t), 0, c.RGB_MAX)))

    return RGBA(r=cv(R), g=cv(G), b=cv(B), a=_alpha(A))


# HSL / HSV -------------------------------------------------------

HSL_RE = re.compile(
    f"^hsla?{ws}\\({ws}({angle}){sep}({channel}){sep}({channel}){alpha_tail}{ws}\\)$",
    re.IGNORECASE,
)

HSV_RE = re.compile(
    f"^hsva?{ws}\\({ws}({angle}){sep}({channel}){sep}({channel}){alpha_tail}{ws}\\)$",
    re.IGNORECASE,
)


def parse_hsl(s: str) -> Optional[RGBA]:
    """Parse HSL/HSLA color string to RGBA."""
    m = HSL_RE.match(s)
    if not m:
        return None
    h_val, s_val, l_val, a_val = m.groups()
    sat = clamp(to_fraction(s_val), 0, 1)
    light = clamp(to_fraction(l_val), 0, 1)
    return hsl_to_rgb(angle_to_deg(h_val) % c.HUE_MAX, sat, light, _alpha(a_val))


def parse_hsv(s: str) -> Optional[RGBA]:
    """Parse HSV/HSVA color string to RGBA."""
    m = HSV_RE.match(s)
    if not m:
        return None
    h_val, s_val, v_val, a_val = m.groups()
    sat = clamp(to_fraction(s_val), 0, 1)
    value = clamp(to_fraction(v_val), 0, 1)
    return hsv_to_rgb(angle_to_deg(h_val) % c.HUE_MAX, sat, value, _alpha(a_val))


# NAMED -----------------------------------------------------------

def parse_named(s: str) -> Optional[RGBA]:
    """Parse named color string to RGBA."""
    hex_val = NAMED.get(s.lower())
    if not hex_val:
        return None
    return parse_hex(hex_val)


# Top-level parse to RGBA -----------------------------------------

def parse_css_color(input_str: str) -> Optional[RGBA]:
    """Parse any supported CSS color string to RGBA, or None."""
    s = input_str.strip()
    for parse in (parse_named, parse_hex, parse_rgb, parse_hsl, parse_hsv):
        result = parse(s)
        if result is not None:
            return result
    return None


# Structured input ------------------------------------------------

def _present(data: Mapping, key: str) -> bool:
    return data.get(key) is not None


def _named_fields(data: Mapping) -> dict:
    return {key: value for key, value in data.items() if isinstance(key, str)}


def _sniff(data: Mapping) -> ColorPatch:
    """Pick a patch kind from the keys a plain mapping carries."""
    if data.get("hex"):
        return HexInput(hex=data["hex"], source=data.get("source"))
    if _present(data, "s") and _present(data, "l"):
        return HslInput.model_validate(_named_fields(data))
    if _present(data, "s") and _present(data, "v"):
        return HsvInput.model_validate(_named_fields(data))
    # Absent RGB channels read as 0, matching the legacy picker
    fields = {key: data.get(key) or 0 for key in ("r", "g", "b")}
    return RgbInput(**fields, a=data.get("a"), source=data.get("source"))


def coerce_color_input(data: Any) -> ColorPatch:
    """Turn any accepted input shape into one tagged patch."""
    if isinstance(data, (HexInput, RgbInput, HslInput, HsvInput)):
        return data
    if isinstance(data, (RGBA, HSLA, HSVA)):
        data = data.model_dump()
    if isinstance(data, str):
        return HexInput(hex=data)
    if isinstance(data, int) and not isinstance(data, bool):
        if not 0 <= data <= 0xFFFFFF:
            raise InvalidColorError(data, "Color number out of range")
        return RgbInput(r=(data >> 16) & 0xFF, g=(data >> 8) & 0xFF, b=data & 0xFF)
    if not isinstance(data, Mapping):
        raise InvalidColorError(data, "Unsupported color input")

    try:
        if "kind" in data:
            return color_input_adapter.validate_python(_named_fields(data))
        return _sniff(data)
    except ValidationError as exc:
        raise InvalidColorError(data, "Invalid color channels") from exc


def resolve_channels(
    patch: ColorPatch,
    old_hue: Optional[float] = None,
    disable_alpha: bool = False,
) -> Channels:
    """Fill in defaults and return the patch's own color space fully populated."""
    if isinstance(patch, HexInput):
        rgba = parse_css_color(patch.hex)
        if rgba is None:
            raise InvalidColorError(patch.hex, "Unrecognized color string")
        if disable_alpha:
            rgba = rgba.model_copy(update={"a": c.OPAQUE})
        return rgba

    alpha = c.OPAQUE if disable_alpha or patch.a is None else patch.a
    if isinstance(patch, RgbInput):
        return RGBA(r=patch.r, g=patch.g, b=patch.b, a=alpha)

    hue = patch.h if patch.h is not None else (old_hue if old_hue is not None else 0)
    if isinstance(patch, HslInput):
        return HSLA(h=hue, s=patch.s, l=patch.l, a=alpha)
    return HSVA(h=hue, s=patch.s, v=patch.v, a=alpha)


def parse_color_input(
    data: Any,
    old_hue: Optional[float] = None,
    disable_alpha: bool = False,
) -> Channels:
    """Parse raw input into RGBA, HSLA or HSVA, whichever space it was given in."""
    patch = coerce_color_input(data)
    logger.debug(f"Parsed {patch.kind} input from source {patch.source!r}")
    return resolve_channels(patch, old_hue, disable_alpha)
