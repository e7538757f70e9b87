"""
Assembly of the canonical ``Color`` record from a single-space input.
"""

import logging
from typing import Any, Optional

from . import config as c
from .converter import (
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    preserve_hue,
    rgb_to_hsl,
    rgb_to_hsv,
    to_hex,
    to_hsl_string,
    to_hsv_string,
    to_rgb_string,
)
from .errors import InvalidColorError
from .numbers import round_alpha
from .parser import coerce_color_input, resolve_channels
from .schemas.responses import HSLA, RGBA, Color

logger = logging.getLogger(__name__)


def to_canonical_color(
    data: Any,
    old_hue: Optional[float] = None,
    disable_alpha: bool = False,
    fallback: Optional[Color] = None,
) -> Color:
    """
    Build the full ``Color`` record for one edit.

    Args:
        data: A color string, a tagged patch, a plain channel mapping, a bare
            ``0xRRGGBB`` integer or an RGBA/HSLA/HSVA record.
        old_hue: Hue carried over from the previous record. Used when the
            input omits a hue or the result is achromatic.
        disable_alpha: Force alpha to 1 before anything is derived.
        fallback: Last known-good record, returned unchanged when ``data``
            cannot be parsed.

    Returns:
        Color: the same color as hex, RGBA, HSLA and HSVA plus renderings.

    Raises:
        InvalidColorError: ``data`` cannot be parsed and no fallback is given.
    """
    try:
        patch = coerce_color_input(data)
        channels = resolve_channels(patch, old_hue, disable_alpha)
    except InvalidColorError as exc:
        if fallback is None:
            raise
        logger.warning(f"{exc}; keeping last valid color {fallback.hex}")
        return fallback

    if isinstance(channels, RGBA):
        rgb = channels
        hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b, rgb.a)
        hsv = rgb_to_hsv(rgb.r, rgb.g, rgb.b, rgb.a)
    elif isinstance(channels, HSLA):
        hsl = channels
        hsv = hsl_to_hsv(hsl.h, hsl.s, hsl.l, hsl.a)
        rgb = hsl_to_rgb(hsl.h, hsl.s, hsl.l, hsl.a)
    else:
        hsv = channels
        hsl = hsv_to_hsl(hsv.h, hsv.s, hsv.v, hsv.a)
        rgb = hsv_to_rgb(hsv.h, hsv.s, hsv.v, hsv.a)

    explicit_hue = getattr(patch, "h", None)
    if explicit_hue is not None:
        memory = explicit_hue
    else:
        memory = old_hue if old_hue is not None else 0
    hsl, hsv = preserve_hue(hsl, hsv, memory)
    # rgb.a stays exact so the hex alpha digits survive
    hsl = hsl.model_copy(update={"a": round_alpha(hsl.a)})
    hsv = hsv.model_copy(update={"a": round_alpha(hsv.a)})

    if explicit_hue is not None:
        next_hue = explicit_hue
    elif old_hue is not None:
        next_hue = old_hue
    else:
        next_hue = hsl.h

    return Color(
        hex=to_hex(rgb, with_alpha=not disable_alpha and rgb.a != c.OPAQUE),
        rgb=rgb,
        rgb_string=to_rgb_string(rgb),
        hsl=hsl,
        hsl_string=to_hsl_string(hsl),
        hsv=hsv,
        hsv_string=to_hsv_string(hsv),
        old_hue=next_hue,
        source=patch.source,
    )


def parse_color(
    data: Any,
    old_hue: Optional[float] = None,
    hide_alpha: bool = False,
    fallback: Optional[Color] = None,
) -> Color:
    """Entry point for the UI layer: load a value or apply one edit."""
    return to_canonical_color(data, old_hue, hide_alpha, fallback)
