import pytest

from colorpicker import parse_color
from colorpicker.schemas import HSLA
from colorpicker.sliders import alpha_patch, hue_patch, saturation_patch

hsl = HSLA(h=180, s=0.5, l=0.5, a=0.5)


def test_hue_patch_horizontal():
    assert hue_patch(hsl, 50, 0, 200, 10)["h"] == 90
    assert hue_patch(hsl, -5, 0, 200, 10)["h"] == 0
    assert hue_patch(hsl, 205, 0, 200, 10)["h"] == 359
    assert hue_patch(hsl, 100, 0, 200, 10) is None


def test_hue_patch_vertical():
    patch = hue_patch(hsl, 0, 150, 10, 200, direction="vertical")
    assert patch["h"] == 90
    assert patch["s"] == 0.5
    assert hue_patch(hsl, 0, -1, 10, 200, direction="vertical")["h"] == 359
    assert hue_patch(hsl, 0, 201, 10, 200, direction="vertical")["h"] == 0


def test_alpha_patch():
    assert alpha_patch(hsl, 33.3, 0, 100, 10)["a"] == 0.33
    assert alpha_patch(hsl, -1, 0, 100, 10)["a"] == 0
    assert alpha_patch(hsl, 101, 0, 100, 10)["a"] == 1
    assert alpha_patch(hsl, 50, 0, 100, 10) is None
    assert alpha_patch(hsl, 0, 25, 10, 100, direction="vertical")["a"] == 0.25


def test_saturation_patch():
    patch = saturation_patch(hsl, 25, 75, 100, 100)
    assert patch == {"kind": "hsv", "h": 180, "s": 0.25, "v": 0.25, "a": 0.5, "source": "hsva"}
    patch = saturation_patch(hsl, 150, -10, 100, 100)
    assert patch["s"] == 1
    assert patch["v"] == 1


def test_patches_canonicalize():
    color = parse_color(saturation_patch(hsl, 100, 0, 100, 100))
    assert color.hex == "#00ffff80"
    assert color.source == "hsva"
    assert color.hsv.h == pytest.approx(180)
