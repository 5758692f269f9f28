import importlib
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import streamlit as st

from color_spaces import (
    FormatError,
    RgbTuple,
    hex_to_rgb,
    hsl_to_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from defaults import (
    BACKGROUND_SWATCHES,
    DARK_TEXT_COLOR,
    DEFAULT_BASE_RGB,
    DEFAULT_DARK_AMOUNT,
    DEFAULT_DARK_HUE,
    DEFAULT_DARK_SAT,
    DEFAULT_DARKNESS_SCALE,
    DEFAULT_EXPORT_DELIMITER,
    DEFAULT_LIGHT_AMOUNT,
    DEFAULT_LIGHT_HUE,
    DEFAULT_LIGHT_SAT,
    DEFAULT_LIGHTNESS_SCALE,
    DEFAULT_SVG_HEIGHT,
    DEFAULT_SVG_SWATCH_WIDTH,
    LIGHT_TEXT_COLOR,
    RANDOM_AMOUNT_RANGE,
    RANDOM_HUE_RANGE,
    RANDOM_SCALE_RANGE,
    SETTING_BOUNDS,
)
from ramp import dark_ramp, light_ramp

logger = logging.getLogger(__name__)

pyperclip: Optional[Any]
try:
    pyperclip = importlib.import_module("pyperclip")
except ImportError:  # pragma: no cover - optional dependency
    pyperclip = None


@dataclass(frozen=True)
class PaletteSettings:
    dark_amount: int = DEFAULT_DARK_AMOUNT
    darkness_scale: float = DEFAULT_DARKNESS_SCALE
    dark_hue: float = DEFAULT_DARK_HUE
    dark_sat: float = DEFAULT_DARK_SAT
    light_amount: int = DEFAULT_LIGHT_AMOUNT
    lightness_scale: float = DEFAULT_LIGHTNESS_SCALE
    light_hue: float = DEFAULT_LIGHT_HUE
    light_sat: float = DEFAULT_LIGHT_SAT


class SettingUnit(str, Enum):
    COUNT = "count"
    PERCENT = "percent"
    DEGREES = "degrees"


@dataclass(frozen=True)
class SettingField:
    name: str
    label: str
    unit: SettingUnit


DARK_FIELDS = (
    SettingField("dark_amount", "Dark amount", SettingUnit.COUNT),
    SettingField("darkness_scale", "Darkness", SettingUnit.PERCENT),
    SettingField("dark_hue", "Dark hue shift", SettingUnit.DEGREES),
    SettingField("dark_sat", "Dark saturation shift", SettingUnit.PERCENT),
)
LIGHT_FIELDS = (
    SettingField("light_amount", "Light amount", SettingUnit.COUNT),
    SettingField("lightness_scale", "Lightness", SettingUnit.PERCENT),
    SettingField("light_hue", "Light hue shift", SettingUnit.DEGREES),
    SettingField("light_sat", "Light saturation shift", SettingUnit.PERCENT),
)
SETTING_FIELDS: Dict[str, SettingField] = {
    f.name: f for f in DARK_FIELDS + LIGHT_FIELDS
}

UNIT_SUFFIXES = {
    SettingUnit.COUNT: "",
    SettingUnit.PERCENT: "%",
    SettingUnit.DEGREES: "°",
}


def format_setting_value(name: str, value: float) -> str:
    unit = SETTING_FIELDS[name].unit
    if float(value).is_integer():
        value = int(value)
    return f"{value}{UNIT_SUFFIXES[unit]}"


def generate_palette(r: int, g: int, b: int, settings: PaletteSettings) -> List[str]:
    """Build the ramp around ``(r, g, b)``, ordered darkest to lightest.

    The base color sits at index ``settings.dark_amount`` and is encoded
    directly from its channels, never round-tripped through HSL.
    """
    base_hsl = rgb_to_hsl(r, g, b)

    colors = [
        hsl_to_hex(*hsl)
        for hsl in dark_ramp(
            base_hsl,
            amount=settings.dark_amount,
            scale=settings.darkness_scale,
            hue_shift=settings.dark_hue,
            sat_shift=settings.dark_sat,
        )
    ]
    base_hex = rgb_to_hex(r, g, b)
    colors.append(base_hex)
    colors.extend(
        hsl_to_hex(*hsl)
        for hsl in light_ramp(
            base_hsl,
            amount=settings.light_amount,
            scale=settings.lightness_scale,
            hue_shift=settings.light_hue,
            sat_shift=settings.light_sat,
        )
    )

    logger.debug("Generated %d colors around %s", len(colors), base_hex)
    return colors


def generate_palette_from_hex(hex_color: str, settings: PaletteSettings) -> List[str]:
    return generate_palette(*hex_to_rgb(hex_color), settings)


# --- Export ----------------------------------------------------------------

def format_palette_text(
    colors: Sequence[str], delimiter: str = DEFAULT_EXPORT_DELIMITER
) -> str:
    return delimiter.join(colors)


def palette_to_svg(
    colors: Sequence[str],
    swatch_width: int = DEFAULT_SVG_SWATCH_WIDTH,
    height: int = DEFAULT_SVG_HEIGHT,
) -> str:
    width = len(colors) * swatch_width
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]
    for index, color in enumerate(colors):
        parts.append(
            f'<rect x="{index * swatch_width}" y="0" width="{swatch_width}" '
            f'height="{height}" fill="{color}" />'
        )
    parts.append("</svg>")
    return "".join(parts)


def readable_text_color(background_hex: str) -> str:
    if relative_luminance(*hex_to_rgb(background_hex)) > 0.5:
        return DARK_TEXT_COLOR
    return LIGHT_TEXT_COLOR


# --- Randomization ---------------------------------------------------------

def random_base_color(rng: Optional[random.Random] = None) -> RgbTuple:
    rng = rng or random.Random()
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


def randomize_settings(
    settings: PaletteSettings, rng: Optional[random.Random] = None
) -> PaletteSettings:
    """Draw new amounts, scales and hue shifts; saturation shifts are kept."""
    rng = rng or random.Random()
    return replace(
        settings,
        dark_amount=rng.randint(*RANDOM_AMOUNT_RANGE),
        light_amount=rng.randint(*RANDOM_AMOUNT_RANGE),
        darkness_scale=float(rng.randint(*RANDOM_SCALE_RANGE)),
        lightness_scale=float(rng.randint(*RANDOM_SCALE_RANGE)),
        dark_hue=float(rng.randint(*RANDOM_HUE_RANGE)),
        light_hue=float(rng.randint(*RANDOM_HUE_RANGE)),
    )


# --- Streamlit front end ---------------------------------------------------

CHANNEL_KEYS = ("base_r", "base_g", "base_b")


def _ensure_state() -> None:
    for key, value in zip(CHANNEL_KEYS, DEFAULT_BASE_RGB):
        if key not in st.session_state:
            st.session_state[key] = value
    defaults = PaletteSettings()
    for name in SETTING_FIELDS:
        if name not in st.session_state:
            st.session_state[name] = getattr(defaults, name)
    if "background" not in st.session_state:
        st.session_state["background"] = BACKGROUND_SWATCHES[0]


def _current_rgb() -> RgbTuple:
    return tuple(int(st.session_state[key]) for key in CHANNEL_KEYS)


def _current_settings() -> PaletteSettings:
    values = {name: st.session_state[name] for name in SETTING_FIELDS}
    values["dark_amount"] = int(values["dark_amount"])
    values["light_amount"] = int(values["light_amount"])
    return PaletteSettings(**values)


def _set_base_color(rgb: RgbTuple) -> None:
    for key, value in zip(CHANNEL_KEYS, rgb):
        st.session_state[key] = value
    st.session_state["base_hex"] = rgb_to_hex(*rgb)


def _on_hex_input() -> None:
    try:
        rgb = hex_to_rgb(st.session_state["base_hex"].strip().upper())
    except FormatError as exc:
        st.session_state["hex_error"] = str(exc)
        return
    st.session_state.pop("hex_error", None)
    _set_base_color(rgb)


def _on_channel_change() -> None:
    st.session_state["base_hex"] = rgb_to_hex(*_current_rgb())
    st.session_state.pop("hex_error", None)


def _on_randomize_color() -> None:
    _set_base_color(random_base_color())


def _on_randomize_all() -> None:
    _on_randomize_color()
    settings = randomize_settings(_current_settings())
    for name in SETTING_FIELDS:
        st.session_state[name] = getattr(settings, name)


def _copy_to_clipboard(text: str, what: str = "to clipboard") -> None:
    if pyperclip:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            # No copy/paste mechanism, e.g. a headless server.
            logger.warning("Clipboard unavailable: %s", exc)
            st.warning("No clipboard is available in this environment.")
            return
        st.success(f"Copied {what}!")
    else:
        logger.warning("pyperclip is not installed; clipboard export disabled")
        st.warning("pyperclip is not installed in this environment.")


def base_color_component() -> RgbTuple:
    st.header("Base color")
    if "base_hex" not in st.session_state:
        st.session_state["base_hex"] = rgb_to_hex(*_current_rgb())

    st.text_input("Hex", key="base_hex", on_change=_on_hex_input)
    if "hex_error" in st.session_state:
        st.error(st.session_state["hex_error"])

    for key, label in zip(CHANNEL_KEYS, ("Red", "Green", "Blue")):
        st.slider(
            label=label,
            min_value=0,
            max_value=255,
            step=1,
            key=key,
            on_change=_on_channel_change,
        )

    col_color, col_all = st.columns(2)
    col_color.button("Randomize color", on_click=_on_randomize_color)
    col_all.button("Randomize all", on_click=_on_randomize_all)
    return _current_rgb()


def _setting_slider(container: Any, field: SettingField) -> None:
    low, high, step = SETTING_BOUNDS[field.name]
    container.slider(label=field.label, min_value=low, max_value=high, step=step, key=field.name)
    container.caption(format_setting_value(field.name, st.session_state[field.name]))


def settings_component() -> PaletteSettings:
    st.header("Parameters")
    col_dark, col_light = st.columns(2)
    col_dark.subheader("Dark side")
    for field in DARK_FIELDS:
        _setting_slider(col_dark, field)
    col_light.subheader("Light side")
    for field in LIGHT_FIELDS:
        _setting_slider(col_light, field)
    return _current_settings()


def palette_component(colors: List[str]) -> None:
    st.header("Palette")

    background = st.radio(
        "Background", options=list(BACKGROUND_SWATCHES), key="background", horizontal=True
    )
    text_color = readable_text_color(background)
    blocks = "".join(
        f'<div style="flex:1;height:80px;background:{color}" title="{color}"></div>'
        for color in colors
    )
    labels = "".join(
        f'<div style="flex:1;text-align:center;font-size:0.7em;color:{text_color}">{color}</div>'
        for color in colors
    )
    st.markdown(
        f'<div style="background:{background};padding:16px">'
        f'<div style="display:flex">{blocks}</div>'
        f'<div style="display:flex">{labels}</div></div>',
        unsafe_allow_html=True,
    )

    for index, (color, col) in enumerate(zip(colors, st.columns(len(colors)))):
        if col.button("Copy", key=f"copy_swatch_{index}", help=f"Copy {color}"):
            _copy_to_clipboard(color, what=color)

    text = format_palette_text(colors)
    svg = palette_to_svg(colors)

    st.code(body=text, language="text")
    if st.button(label="Copy colors"):
        _copy_to_clipboard(text)

    st.code(body=svg, language="xml")
    if st.button(label="Copy SVG"):
        _copy_to_clipboard(svg)


def main() -> None:
    st.title("Color Palette Generator")
    _ensure_state()

    rgb = base_color_component()
    settings = settings_component()
    palette_component(generate_palette(*rgb, settings))


if __name__ == "__main__":
    main()
