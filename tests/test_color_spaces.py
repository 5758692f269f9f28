import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from color_spaces import (  # noqa: E402
    FormatError,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hue,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_away,
)


def test_rgb_to_hex_is_uppercase_and_zero_padded():
    assert rgb_to_hex(29, 154, 108) == "#1D9A6C"
    assert rgb_to_hex(0, 10, 255) == "#000AFF"


def test_rgb_to_hex_clamps_out_of_range_channels():
    assert rgb_to_hex(-5, 300, 16) == "#00FF10"


def test_rgb_to_hex_rounds_half_away_from_zero():
    assert rgb_to_hex(127.5, 0.4, 254.5) == "#8000FF"
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.49) == 2


def test_hex_to_rgb_accepts_either_case():
    assert hex_to_rgb("#1D9A6C") == (29, 154, 108)
    assert hex_to_rgb("#1d9a6c") == (29, 154, 108)


@pytest.mark.parametrize(
    "bad", ["1D9A6C", "#1D9A6", "#1D9A6CC", "#1D9A6G", "", "##1D9A6", None]
)
def test_hex_to_rgb_rejects_malformed_strings(bad):
    with pytest.raises(FormatError):
        hex_to_rgb(bad)


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        hex_to_rgb("#XYZXYZ")


def test_rgb_to_hsl_known_values():
    assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 100.0, 50.0))
    assert rgb_to_hsl(0, 0, 255) == pytest.approx((240.0, 100.0, 50.0))
    assert rgb_to_hsl(255, 255, 255) == pytest.approx((0.0, 0.0, 100.0))


def test_rgb_to_hsl_achromatic_has_zero_hue_and_saturation():
    h, s, l = rgb_to_hsl(128, 128, 128)
    assert h == 0
    assert s == 0
    assert l == pytest.approx(100 * 128 / 255)


def test_rgb_to_hsl_base_example():
    h, s, l = rgb_to_hsl(29, 154, 108)
    assert h == pytest.approx((79 / 125 + 2) * 60)
    assert s == pytest.approx(100 * 125 / 183)
    assert l == pytest.approx(100 * 183 / 510)


def test_rgb_to_hsl_hue_stays_below_360():
    h, _, _ = rgb_to_hsl(255, 0, 1)
    assert 0 <= h < 360


def test_normalize_hue_wraps_negatives_forward():
    assert normalize_hue(-10) == pytest.approx(350)
    assert normalize_hue(725) == pytest.approx(5)


def test_hsl_to_rgb_wraps_hue():
    assert hsl_to_rgb(-10, 100, 50) == hsl_to_rgb(350, 100, 50)
    assert hsl_to_rgb(840, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(-30, 100, 50) == (255, 0, 128)


def test_hsl_to_rgb_clamps_saturation_and_lightness():
    assert hsl_to_rgb(120, 150, -20) == (0, 0, 0)
    assert hsl_to_rgb(0, -5, 120) == (255, 255, 255)
    r, g, b = hsl_to_rgb(200, -40, 30)
    assert r == g == b


def test_hsl_to_hex_composes_conversion_and_encoding():
    assert hsl_to_hex(0, 100, 50) == "#FF0000"
    assert hsl_to_hex(240, 100, 50) == "#0000FF"


@pytest.mark.parametrize("g", range(0, 256, 5))
def test_rgb_hsl_round_trip_within_one_per_channel(g):
    for r in range(256):
        for b in range(0, 256, 3):
            back = hsl_to_rgb(*rgb_to_hsl(r, g, b))
            assert all(abs(x - y) <= 1 for x, y in zip(back, (r, g, b))), (r, g, b)


def test_hex_to_hsl_round_trip_preserves_value():
    original = "#4A83FF"
    assert hsl_to_hex(*hex_to_hsl(original)) == original


def test_relative_luminance_extremes():
    assert relative_luminance(0, 0, 0) == 0
    assert relative_luminance(255, 255, 255) == pytest.approx(1.0)
