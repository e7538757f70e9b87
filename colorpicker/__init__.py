from .canonical import parse_color, to_canonical_color
from .converter import (
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    to_hex,
    to_hsl_string,
    to_hsv_string,
    to_rgb_string,
)
from .errors import ColorPickerError, InvalidColorError
from .parser import parse_color_input, parse_css_color
from .schemas import HSLA, HSVA, RGBA, Color
from .session import ColorEvent, ColorMode, PickerSession
from .validator import is_plausible_color_patch, is_valid_hex_string, simple_check_for_valid_color

__all__ = [
    "parse_color",
    "to_canonical_color",
    "parse_color_input",
    "parse_css_color",
    "is_valid_hex_string",
    "simple_check_for_valid_color",
    "is_plausible_color_patch",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "to_hex",
    "to_rgb_string",
    "to_hsl_string",
    "to_hsv_string",
    "RGBA",
    "HSLA",
    "HSVA",
    "Color",
    "PickerSession",
    "ColorMode",
    "ColorEvent",
    "ColorPickerError",
    "InvalidColorError",
]
