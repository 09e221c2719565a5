from __future__ import annotations

import pytest

from mmcard.domain.profile import ThemeName
from mmcard.services.theme import (
    DEFAULT_DARK_COLOR,
    DEFAULT_THEME_COLOR,
    LIGHT_TEXT_COLOR,
    ON_DARK_TEXT_COLOR,
    ON_LIGHT_TEXT_COLOR,
    BackgroundKind,
    PanelStyle,
    RowStyle,
    resolve_theme,
)


@pytest.mark.parametrize("theme", [None, "", "light", "neon", "LIGHT ", 42])
def test_light_and_unknown_themes(theme):
    variant = resolve_theme(theme, "#FF0000")
    assert variant.name is ThemeName.LIGHT
    assert variant.background.kind is BackgroundKind.NONE
    assert variant.background.css() == ""
    assert variant.text_color == LIGHT_TEXT_COLOR
    assert variant.panel_style is PanelStyle.CARD
    assert variant.row_style is RowStyle.BORDERED
    assert variant.full_bleed is False


def test_light_theme_uses_theme_color_as_accent():
    assert resolve_theme("light", "#FF0000").accent_color == "#FF0000"
    assert resolve_theme("light", "red").accent_color == DEFAULT_THEME_COLOR


def test_full_theme_solid_background():
    variant = resolve_theme("full", "#102030")
    assert variant.full_bleed is True
    assert variant.background.kind is BackgroundKind.SOLID
    assert variant.background.color == "#102030"
    assert variant.panel_style is PanelStyle.GLASS
    assert variant.row_style is RowStyle.GLASS
    assert variant.text_color == ON_DARK_TEXT_COLOR


def test_full_theme_with_light_color_uses_dark_text():
    assert resolve_theme("full", "#F5F5F5").text_color == ON_LIGHT_TEXT_COLOR


def test_full_theme_rejects_injected_color():
    variant = resolve_theme("full", "#000;}</style><script>")
    assert variant.background.color == DEFAULT_THEME_COLOR
    assert "<" not in variant.page_style()


def test_dark_shares_full_bleed_styling_with_solid_background():
    variant = resolve_theme("dark", None, "#000000", "#FFFFFF")
    assert variant.name is ThemeName.DARK
    assert variant.full_bleed is True
    assert variant.background.kind is BackgroundKind.SOLID
    assert variant.background.color == DEFAULT_DARK_COLOR
    assert variant.panel_style is PanelStyle.GLASS


def test_gradient_theme_two_stops():
    variant = resolve_theme("gradient", None, "#0B2D4D", "#1E6091")
    assert variant.background.kind is BackgroundKind.GRADIENT
    assert variant.background.css() == "background: linear-gradient(to bottom, #0B2D4D, #1E6091);"


def test_gradient_with_malformed_endpoint_falls_back_to_solid():
    variant = resolve_theme("gradient", "#123456", "#0B2D4D", "not-a-color")
    assert variant.background.kind is BackgroundKind.SOLID
    assert variant.background.color == "#123456"
    assert "gradient" not in variant.background.css()


def test_gradient_with_malformed_start_keeps_valid_end_as_solid():
    variant = resolve_theme("gradient", None, "blue", "#1E6091")
    assert variant.background.kind is BackgroundKind.SOLID
    assert variant.background.color == "#1E6091"


def test_gradient_without_any_color_uses_default():
    variant = resolve_theme("gradient")
    assert variant.background.kind is BackgroundKind.SOLID
    assert variant.background.color == DEFAULT_THEME_COLOR


def test_gradient_text_color_uses_mean_luminance_of_both_stops():
    # (32 + 255) / 2 = 143.5, light on average
    assert resolve_theme("gradient", None, "#202020", "#FFFFFF").text_color == ON_LIGHT_TEXT_COLOR
    # (255 + 0) / 2 = 127.5, dark on average
    assert resolve_theme("gradient", None, "#FFFFFF", "#000000").text_color == ON_DARK_TEXT_COLOR
    assert resolve_theme("gradient", None, "#000000", "#FFFFFF").text_color == ON_DARK_TEXT_COLOR
