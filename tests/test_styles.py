"""Tests for the color palette and display styling hook."""

import sys
import types

import pytest
from matplotlib.colors import is_color_like

from mimiq_visual.data import styles
from mimiq_visual.data.styles import QP_COLORS, init_display, load_stylesheet


class TestPalette:
    """Tests for the color constants."""

    def test_six_colors_in_order(self) -> None:
        """Palette tuple matches the numbered constants."""
        assert QP_COLORS == (
            styles.QP_COLOR1,
            styles.QP_COLOR2,
            styles.QP_COLOR3,
            styles.QP_COLOR4,
            styles.QP_COLOR5,
            styles.QP_COLOR6,
        )

    def test_primary_color(self) -> None:
        """Histogram color is the teal brand color."""
        assert styles.QP_COLOR1 == "#0c7e8f"

    @pytest.mark.parametrize("color", QP_COLORS)
    def test_valid_colors(self, color: str) -> None:
        """Every palette entry is a matplotlib color."""
        assert is_color_like(color)


class TestLoadStylesheet:
    """Tests for load_stylesheet function."""

    def test_wrapped_in_style_tag(self) -> None:
        """Stylesheet is ready for HTML display."""
        css = load_stylesheet()
        assert css.startswith("<style>")
        assert css.rstrip().endswith("</style>")

    def test_uses_palette(self) -> None:
        """Stylesheet defines the palette colors."""
        css = load_stylesheet()
        for color in QP_COLORS:
            assert color in css


class TestInitDisplay:
    """Tests for init_display function."""

    def test_without_ipython_installed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns False when IPython is missing."""
        monkeypatch.setattr(styles, "HAS_IPYTHON", False)
        assert init_display() is False

    def test_outside_running_session(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns False when no IPython shell is running."""
        monkeypatch.setattr(styles, "HAS_IPYTHON", True)
        monkeypatch.setattr(styles, "get_ipython", lambda: None, raising=False)
        assert init_display() is False

    def test_in_session_displays_css(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Inside a session the stylesheet is displayed and SVG enabled."""
        displayed: list[object] = []
        formats: list[str] = []

        backend_inline = types.ModuleType("matplotlib_inline.backend_inline")
        backend_inline.set_matplotlib_formats = formats.append  # type: ignore[attr-defined]
        package = types.ModuleType("matplotlib_inline")
        package.backend_inline = backend_inline  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, "matplotlib_inline", package)
        monkeypatch.setitem(sys.modules, "matplotlib_inline.backend_inline", backend_inline)

        monkeypatch.setattr(styles, "HAS_IPYTHON", True)
        monkeypatch.setattr(styles, "get_ipython", lambda: object(), raising=False)
        monkeypatch.setattr(styles, "HTML", lambda data: ("html", data), raising=False)
        monkeypatch.setattr(styles, "display", displayed.append, raising=False)

        assert init_display() is True
        assert displayed == [("html", load_stylesheet())]
        assert formats == ["svg"]
