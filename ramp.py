"""Interpolation of the darker and lighter ramps around a base HSL color."""
from __future__ import annotations

from typing import List

from color_spaces import HslColor


def dark_ramp(
    base: HslColor,
    *,
    amount: int,
    scale: float,
    hue_shift: float,
    sat_shift: float,
) -> List[HslColor]:
    """Darker variants of ``base``, darkest first, base itself excluded.

    The darkest step removes ``scale`` percent of the base lightness and the
    full ``hue_shift``/``sat_shift``; nearer steps take a proportional share.
    Returned values may be out of range and are resolved on encoding.
    """
    base_h, base_s, base_l = base
    delta_l = base_l * (scale / 100)
    colors: List[HslColor] = []
    for i in range(amount, 0, -1):
        fraction = i / amount
        colors.append(
            (
                base_h - hue_shift * fraction,
                base_s - sat_shift * fraction,
                base_l - delta_l * fraction,
            )
        )
    return colors


def light_ramp(
    base: HslColor,
    *,
    amount: int,
    scale: float,
    hue_shift: float,
    sat_shift: float,
) -> List[HslColor]:
    """Lighter variants of ``base``, nearest first, lightest last.

    Lightness moves ``scale`` percent of the way from the base toward white.
    """
    base_h, base_s, base_l = base
    delta_l = (100 - base_l) * (scale / 100)
    colors: List[HslColor] = []
    for i in range(1, amount + 1):
        fraction = i / amount
        colors.append(
            (
                base_h + hue_shift * fraction,
                base_s + sat_shift * fraction,
                base_l + delta_l * fraction,
            )
        )
    return colors
