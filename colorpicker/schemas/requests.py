from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .. import config as c
from ..numbers import clamp, round_half_up, to_finite_float, to_fraction


class _ColorPatch(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="ignore")

    source: Optional[str] = Field(default=None, description="Opaque tag naming the UI surface that produced the edit")

    @field_validator("a", mode="before", check_fields=False)
    @classmethod
    def coerce_alpha(cls, v):
        if v is None:
            return None
        if isinstance(v, str) and v.strip().endswith("%"):
            return clamp(to_finite_float(v.strip()[:-1]) / c.PERCENT, 0.0, c.OPAQUE)
        return clamp(to_finite_float(v), 0.0, c.OPAQUE)


class HexInput(_ColorPatch):
    kind: Literal["hex"] = "hex"
    hex: str = Field(..., description="Any CSS color string, usually a hex literal")


class RgbInput(_ColorPatch):
    kind: Literal["rgb"] = "rgb"
    r: int
    g: int
    b: int
    a: Optional[float] = None

    @field_validator("r", "g", "b", mode="before")
    @classmethod
    def coerce_channel(cls, v) -> int:
        if isinstance(v, str) and v.strip().endswith("%"):
            v = to_finite_float(v.strip()[:-1]) * c.RGB_MAX / c.PERCENT
        return int(round_half_up(clamp(to_finite_float(v), 0, c.RGB_MAX)))


class _HueInput(_ColorPatch):
    @field_validator("h", mode="before", check_fields=False)
    @classmethod
    def coerce_hue(cls, v):
        if v is None:
            return None
        return to_finite_float(v) % c.HUE_MAX

    @field_validator("s", "l", "v", mode="before", check_fields=False)
    @classmethod
    def coerce_fraction(cls, v) -> float:
        return clamp(to_fraction(v), 0.0, 1.0)


class HslInput(_HueInput):
    kind: Literal["hsl"] = "hsl"
    h: Optional[float] = None
    s: float
    l: float
    a: Optional[float] = None


class HsvInput(_HueInput):
    kind: Literal["hsv"] = "hsv"
    h: Optional[float] = None
    s: float
    v: float
    a: Optional[float] = None


ColorInput = Annotated[
    Union[HexInput, RgbInput, HslInput, HsvInput],
    Field(discriminator="kind"),
]

color_input_adapter: TypeAdapter = TypeAdapter(ColorInput)
