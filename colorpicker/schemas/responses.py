from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .. import config as c
from ..numbers import clamp


class RGBA(BaseModel):
    """8-bit RGB channels with a unit alpha."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    r: int = Field(ge=0, le=c.RGB_MAX)
    g: int = Field(ge=0, le=c.RGB_MAX)
    b: int = Field(ge=0, le=c.RGB_MAX)
    a: float = Field(default=c.OPAQUE, ge=0.0, le=1.0)


class _HueModel(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator("h", check_fields=False)
    @classmethod
    def wrap_hue(cls, v: float) -> float:
        return v % c.HUE_MAX

    @field_validator("s", "l", "v", check_fields=False)
    @classmethod
    def clamp_unit(cls, v: float) -> float:
        return clamp(v, 0.0, 1.0)

    @field_validator("a", check_fields=False)
    @classmethod
    def clamp_alpha(cls, v: float) -> float:
        return clamp(v, 0.0, 1.0)


class HSLA(_HueModel):
    """Hue in degrees; saturation, lightness and alpha as fractions."""

    h: float
    s: float
    l: float
    a: float = c.OPAQUE


class HSVA(_HueModel):
    """Hue in degrees; saturation, value and alpha as fractions."""

    h: float
    s: float
    v: float
    a: float = c.OPAQUE


class Color(BaseModel):
    """
    Canonical picker value: one color in every representation.

    ``old_hue`` is the hue to hand back on the next edit so that a
    desaturated color keeps its last meaningful hue.
    """

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    hex: str
    rgb: RGBA
    rgb_string: str
    hsl: HSLA
    hsl_string: str
    hsv: HSVA
    hsv_string: str
    old_hue: float
    source: Optional[str] = None
