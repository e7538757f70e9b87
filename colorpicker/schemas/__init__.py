from .requests import ColorInput, HexInput, HslInput, HsvInput, RgbInput, color_input_adapter
from .responses import HSLA, HSVA, RGBA, Color

__all__ = [
    "ColorInput",
    "HexInput",
    "RgbInput",
    "HslInput",
    "HsvInput",
    "color_input_adapter",
    "RGBA",
    "HSLA",
    "HSVA",
    "Color",
]
