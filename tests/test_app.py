import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from streamlit.testing.v1 import AppTest  # noqa: E402

from defaults import DEFAULT_BASE_RGB  # noqa: E402
from palette_generator import PaletteSettings, generate_palette  # noqa: E402

pyperclip = pytest.importorskip("pyperclip")

APP_PATH = str(ROOT / "palette_generator.py")


def _run_app() -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_swatch_copy_puts_single_color_on_clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    colors = generate_palette(*DEFAULT_BASE_RGB, PaletteSettings())

    at = _run_app()
    at.button(key="copy_swatch_0").click().run()

    assert not at.exception
    assert copied == [colors[0]]
    assert at.success[0].value == f"Copied {colors[0]}!"


def test_every_swatch_has_a_copy_button():
    at = _run_app()
    settings = PaletteSettings()
    for index in range(settings.dark_amount + 1 + settings.light_amount):
        assert at.button(key=f"copy_swatch_{index}") is not None


def test_swatch_copy_without_clipboard_warns(monkeypatch):
    def no_clipboard(text):
        raise pyperclip.PyperclipException("no copy mechanism")

    monkeypatch.setattr(pyperclip, "copy", no_clipboard)

    at = _run_app()
    at.button(key="copy_swatch_5").click().run()

    assert not at.exception
    assert at.warning[0].value == "No clipboard is available in this environment."
