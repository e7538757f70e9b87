import pytest

from colorpicker.errors import InvalidColorError
from colorpicker.parser import (
    angle_to_deg,
    coerce_color_input,
    parse_color_input,
    parse_css_color,
)
from colorpicker.schemas import HSLA, HSVA, RGBA, HexInput, HslInput, HsvInput, RgbInput


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#ff0000", (255, 0, 0, 1)),
        ("#F00", (255, 0, 0, 1)),
        ("f00", (255, 0, 0, 1)),
        ("#ff000080", (255, 0, 0, 0.5)),
        ("#f008", (255, 0, 0, 0.53)),
        ("  #3366ff  ", (51, 102, 255, 1)),
        ("rgb(51, 102, 255)", (51, 102, 255, 1)),
        ("rgb(51 102 255 / 50%)", (51, 102, 255, 0.5)),
        ("rgba(100%, 0%, 0%, 0.25)", (255, 0, 0, 0.25)),
        ("RGBA(300, -5, 0, 2)", (255, 0, 0, 1)),
        ("hsl(225, 100%, 60%)", (51, 102, 255, 1)),
        ("hsla(0.5turn, 100%, 50%, 0.3)", (0, 255, 255, 0.3)),
        ("hsv(225, 80%, 100%)", (51, 102, 255, 1)),
        ("hsva(120, 1, 1, 0.5)", (0, 255, 0, 0.5)),
        ("rebeccapurple", (102, 51, 153, 1)),
        ("Red", (255, 0, 0, 1)),
        ("transparent", (0, 0, 0, 0)),
    ],
)
def test_parse_css_color(text, expected):
    rgba = parse_css_color(text)
    assert rgba is not None
    assert (rgba.r, rgba.g, rgba.b) == expected[:3]
    assert rgba.a == pytest.approx(expected[3], abs=0.005)


@pytest.mark.parametrize(
    "text",
    ["", "#12345", "#gg0000", "rgb(1, 2)", "hsl(red, 1, 1)", "not-a-color", "#1234567", "rgb(123)"],
)
def test_parse_css_color_rejects_malformed(text):
    assert parse_css_color(text) is None


def test_angle_units():
    assert angle_to_deg("90") == 90
    assert angle_to_deg("90deg") == 90
    assert angle_to_deg("100grad") == 90
    assert angle_to_deg("0.25turn") == 90
    assert abs(angle_to_deg("3.14159265rad") - 180) < 1e-6


def test_sniffing_plain_mappings():
    assert isinstance(coerce_color_input("#fff"), HexInput)
    assert isinstance(coerce_color_input({"hex": "#fff", "source": "hex"}), HexInput)
    assert isinstance(coerce_color_input({"h": 10, "s": 0.5, "l": 0.5}), HslInput)
    assert isinstance(coerce_color_input({"s": 0.5, "v": 0.5}), HsvInput)
    assert isinstance(coerce_color_input({"r": 1, "g": 2, "b": 3}), RgbInput)


def test_explicit_kind_wins_over_keys():
    patch = coerce_color_input({"kind": "hsv", "h": 10, "s": 0.5, "l": 0.1, "v": 0.9})
    assert isinstance(patch, HsvInput)
    assert patch.v == 0.9


def test_records_are_accepted():
    patch = coerce_color_input(HSVA(h=10, s=0.5, v=0.5))
    assert isinstance(patch, HsvInput)
    assert patch.h == 10


def test_bare_number():
    assert parse_color_input(0x3366FF) == RGBA(r=51, g=102, b=255, a=1)
    with pytest.raises(InvalidColorError):
        parse_color_input(0x1000000)


def test_missing_rgb_channels_read_as_zero():
    assert parse_color_input({"g": 128}) == RGBA(r=0, g=128, b=0, a=1)


def test_percent_strings_become_fractions():
    hsl = parse_color_input({"h": 40, "s": "42%", "l": "10%"})
    assert isinstance(hsl, HSLA)
    assert hsl.s == pytest.approx(0.42)
    assert hsl.l == pytest.approx(0.10)


def test_numbers_above_one_are_percents():
    hsl = parse_color_input({"s": 42, "l": 1})
    assert hsl.s == pytest.approx(0.42)
    assert hsl.l == 1


def test_hsl_patch_defaults_hue_and_alpha():
    hsl = parse_color_input({"s": 0.5, "l": 0.5}, old_hue=200)
    assert hsl == HSLA(h=200, s=0.5, l=0.5, a=1)

    hsl = parse_color_input({"s": 0.5, "l": 0.5})
    assert hsl.h == 0


def test_hsv_patch_keeps_explicit_hue():
    hsv = parse_color_input({"h": 30, "s": 0.5, "v": 0.5, "a": 0.4}, old_hue=200)
    assert hsv == HSVA(h=30, s=0.5, v=0.5, a=0.4)


def test_out_of_range_edits_are_clamped():
    hsl = parse_color_input({"h": 400, "s": 0.5, "l": 0.5, "a": 1.7})
    assert hsl.h == 40
    assert hsl.a == 1

    rgba = parse_color_input({"r": 300, "g": -4, "b": 12.5, "a": -1})
    assert rgba == RGBA(r=255, g=0, b=13, a=0)


def test_disable_alpha_forces_opaque():
    assert parse_color_input("#ff000080", disable_alpha=True).a == 1
    assert parse_color_input({"r": 1, "g": 2, "b": 3, "a": 0.2}, disable_alpha=True).a == 1
    assert parse_color_input({"s": 0.1, "v": 0.2, "a": 0.2}, disable_alpha=True).a == 1


@pytest.mark.parametrize(
    "data",
    [
        "nonsense",
        {"hex": "#zzzzzz"},
        {"r": "abc", "g": 0, "b": 0},
        {"s": float("nan"), "l": 0.5},
        {"r": float("inf"), "g": 0, "b": 0},
        {"kind": "hsl", "s": 0.5},
        {"kind": "cmyk", "c": 1},
        [255, 0, 0],
        None,
        True,
    ],
)
def test_invalid_input_raises(data):
    with pytest.raises(InvalidColorError):
        parse_color_input(data)
