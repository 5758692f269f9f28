"""Color space utilities for RGB, HSL and hex conversions."""
from __future__ import annotations

import math
import string
from typing import Tuple

RgbTuple = Tuple[int, int, int]
HslColor = Tuple[float, float, float]


class FormatError(ValueError):
    """Raised when a hex color string is not of the form ``#RRGGBB``."""


# --- Basic RGB helpers -----------------------------------------------------

def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    ``round()`` uses banker's rounding, which would make ``127.5`` and
    ``128.5`` land on the same byte.
    """
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    return max(0, min(255, round_half_away(value)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode a triple as ``#RRGGBB`` (uppercase).

    Channels outside [0, 255] are clamped and non-integers rounded half away
    from zero, so this never produces an invalid string.
    """
    return "#{:02X}{:02X}{:02X}".format(
        clamp_channel(r), clamp_channel(g), clamp_channel(b)
    )


def hex_to_rgb(hex_color: str) -> RgbTuple:
    if (
        not isinstance(hex_color, str)
        or len(hex_color) != 7
        or not hex_color.startswith("#")
        or any(ch not in string.hexdigits for ch in hex_color[1:])
    ):
        raise FormatError(f"Expected a color of the form #RRGGBB, got {hex_color!r}")
    return (int(hex_color[1:3], 16), int(hex_color[3:5], 16), int(hex_color[5:7], 16))


def relative_luminance(r: int, g: int, b: int) -> float:
    """Weighted brightness in [0, 1] used to pick readable text on a swatch."""
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


# --- HSL conversions -------------------------------------------------------

def normalize_hue(hue: float) -> float:
    # Python's modulo already maps negatives forward (-10 -> 350).
    return hue % 360.0


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def rgb_to_hsl(r: int, g: int, b: int) -> HslColor:
    """Convert byte channels to ``(h, s, l)``.

    Hue is in degrees [0, 360); saturation and lightness are percentages.
    """
    r_f, g_f, b_f = r / 255, g / 255, b / 255
    high = max(r_f, g_f, b_f)
    low = min(r_f, g_f, b_f)
    lightness = (high + low) / 2

    if high == low:
        return (0.0, 0.0, lightness * 100)

    d = high - low
    saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
    if high == r_f:
        hue = (g_f - b_f) / d + (6 if g_f < b_f else 0)
    elif high == g_f:
        hue = (b_f - r_f) / d + 2
    else:
        hue = (r_f - g_f) / d + 4
    hue /= 6

    return (hue * 360, saturation * 100, lightness * 100)


def _sector_offsets(hue: float, c: float, x: float) -> Tuple[float, float, float]:
    if hue < 60:
        return (c, x, 0.0)
    if hue < 120:
        return (x, c, 0.0)
    if hue < 180:
        return (0.0, c, x)
    if hue < 240:
        return (0.0, x, c)
    if hue < 300:
        return (x, 0.0, c)
    return (c, 0.0, x)


def hsl_to_rgb(h: float, s: float, l: float) -> RgbTuple:
    """Convert ``(h, s, l)`` back to byte channels.

    Hue wraps into [0, 360) and saturation/lightness are clamped to [0, 100]
    first, so out-of-range ramp values are valid input. Channels are rounded
    half away from zero.
    """
    hue = normalize_hue(h)
    saturation = clamp_percent(s) / 100
    lightness = clamp_percent(l) / 100

    c = (1 - abs(2 * lightness - 1)) * saturation
    x = c * (1 - abs((hue / 60) % 2 - 1))
    m = lightness - c / 2
    r, g, b = _sector_offsets(hue, c, x)
    return (
        clamp_channel((r + m) * 255),
        clamp_channel((g + m) * 255),
        clamp_channel((b + m) * 255),
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_hsl(hex_color: str) -> HslColor:
    return rgb_to_hsl(*hex_to_rgb(hex_color))
