"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import cachesweep.core.theme as theme_module
import pytest
from cachesweep.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.root == "#3b8eea"
        assert colors.match == "#f5b332"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts valid hex color codes."""
        colors = ThemeColors(root="#AABBCC", match="#abc")
        assert colors.root == "#AABBCC"
        assert colors.match == "#abc"

    def test_strips_whitespace(self) -> None:
        """Surrounding whitespace is removed."""
        assert ThemeColors(root="  #123456 ").root == "#123456"

    def test_missing_hash(self) -> None:
        """ThemeColors rejects colors without '#'."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(root="ffffff")

    def test_wrong_length(self) -> None:
        """ThemeColors rejects colors of the wrong length."""
        with pytest.raises(ValueError, match="#RGB or #RRGGBB"):
            ThemeColors(root="#ffff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(root="#gggggg")

    def test_non_string(self) -> None:
        """ThemeColors rejects non-string values."""
        with pytest.raises(ValueError, match="must be a string"):
            ThemeColors(root=123)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nroot = "#000000"\nmatch = "#aabbcc"\n')

        result = _load_toml_colors(theme_file)

        assert result == {"root": "#000000", "match": "#aabbcc"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_returns_none_for_non_table_colors(self, tmp_path: Path) -> None:
        """Returns None when colors is not a table."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert _load_toml_colors(theme_file) is None

    def test_returns_empty_dict_for_missing_colors_section(self, tmp_path: Path) -> None:
        """Returns empty dict when colors section is missing."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[other]\nkey = "value"\n')

        assert _load_toml_colors(theme_file) == {}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_defaults_without_user_file(self, tmp_path: Path) -> None:
        """Without a user theme, defaults are used."""
        with patch(
            "cachesweep.core.theme.get_user_theme_path",
            return_value=tmp_path / "missing.toml",
        ):
            colors = load_theme()

        assert colors == ThemeColors()

    def test_user_theme_overrides_defaults(self, tmp_path: Path) -> None:
        """User theme overrides individual colors."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nmatch = "#ff0000"\n')

        with patch(
            "cachesweep.core.theme.get_user_theme_path",
            return_value=user_theme,
        ):
            colors = load_theme()

        assert colors.match == "#ff0000"
        assert colors.root == "#3b8eea"

    def test_graceful_fallback_on_invalid_user_theme(self, tmp_path: Path) -> None:
        """Falls back to defaults when user theme is unparseable."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text("invalid toml [[[")

        with patch(
            "cachesweep.core.theme.get_user_theme_path",
            return_value=user_theme,
        ):
            colors = load_theme()

        assert colors == ThemeColors()

    def test_graceful_fallback_on_invalid_color(self, tmp_path: Path) -> None:
        """Falls back to defaults when a user color fails validation."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nroot = "blue"\n')

        with patch(
            "cachesweep.core.theme.get_user_theme_path",
            return_value=user_theme,
        ):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_returns_rich_theme(self) -> None:
        """Returns a Rich Theme instance."""
        assert isinstance(get_rich_theme(ThemeColors()), Theme)

    def test_includes_report_styles(self) -> None:
        """Theme includes the styles used for report lines."""
        theme = get_rich_theme(ThemeColors())

        assert "root" in theme.styles
        assert "match" in theme.styles
        assert "error" in theme.styles
        assert theme.styles["error"].bold is True

    def test_only_report_styles_are_configurable(self) -> None:
        """The configurable colors are exactly the styles the output uses."""
        assert set(ThemeColors.model_fields) == {"root", "match", "error"}
        assert set(get_rich_theme(ThemeColors()).styles) >= {"root", "match", "error"}

    def test_unused_style_name_falls_back_to_defaults(self, tmp_path: Path) -> None:
        """A theme file naming a style the output never uses is rejected."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nmatch = "#ff0000"\nsuccess = "#00ff00"\n')

        with patch(
            "cachesweep.core.theme.get_user_theme_path",
            return_value=user_theme,
        ):
            colors = load_theme()

        assert colors == ThemeColors()


class TestThemeCache:
    """Tests for the cached theme accessors."""

    def test_get_theme_caches(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        with patch.object(theme_module, "_cached_theme", None):
            first = get_theme()
            second = get_theme()

        assert first is second

