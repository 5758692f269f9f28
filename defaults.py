"""Centralized application default values for easier review and tweaks."""

from typing import Dict, Tuple, Union

# Base color defaults
DEFAULT_BASE_RGB: Tuple[int, int, int] = (29, 154, 108)

# Dark side defaults
DEFAULT_DARK_AMOUNT = 5
DEFAULT_DARKNESS_SCALE = 10.0  # % of base lightness removed at the darkest step
DEFAULT_DARK_HUE = 0.0
DEFAULT_DARK_SAT = 0.0

# Light side defaults
DEFAULT_LIGHT_AMOUNT = 6
DEFAULT_LIGHTNESS_SCALE = 95.0  # % of headroom to white added at the lightest step
DEFAULT_LIGHT_HUE = 0.0
DEFAULT_LIGHT_SAT = 0.0

# Slider bounds, keyed by settings field name: (min, max, step).
# Amount bounds stay ints so their sliders step in whole colors.
SETTING_BOUNDS: Dict[str, Tuple[Union[int, float], ...]] = {
    "dark_amount": (0, 20, 1),
    "darkness_scale": (0.0, 100.0, 1.0),
    "dark_hue": (-180.0, 180.0, 1.0),
    "dark_sat": (-100.0, 100.0, 1.0),
    "light_amount": (0, 20, 1),
    "lightness_scale": (0.0, 100.0, 1.0),
    "light_hue": (-180.0, 180.0, 1.0),
    "light_sat": (-100.0, 100.0, 1.0),
}

# Randomization ranges, inclusive on both ends
RANDOM_AMOUNT_RANGE: Tuple[int, int] = (2, 9)
RANDOM_SCALE_RANGE: Tuple[int, int] = (10, 89)
RANDOM_HUE_RANGE: Tuple[int, int] = (-30, 29)

# Export defaults
DEFAULT_EXPORT_DELIMITER = ", "
DEFAULT_SVG_SWATCH_WIDTH = 50
DEFAULT_SVG_HEIGHT = 100

# Preview background choices
BACKGROUND_SWATCHES: Tuple[str, ...] = ("#FFFFFF", "#F2F2F2", "#808080", "#1E1E1E", "#000000")
DARK_TEXT_COLOR = "#111111"
LIGHT_TEXT_COLOR = "#FFFFFF"
