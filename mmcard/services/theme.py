"""Theme resolution: maps a profile's theme fields to a concrete visual variant."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from mmcard.domain.profile import Profile, ThemeName
from mmcard.services.normalize import safe_hex_color

DEFAULT_THEME_COLOR = "#0B2D4D"
DEFAULT_DARK_COLOR = "#111827"
LIGHT_TEXT_COLOR = "#111827"
ON_DARK_TEXT_COLOR = "#FFFFFF"
ON_LIGHT_TEXT_COLOR = "#0F172A"

FULL_BLEED_THEMES = frozenset({ThemeName.DARK, ThemeName.FULL, ThemeName.GRADIENT})


class BackgroundKind(str, Enum):
    NONE = "none"
    SOLID = "solid"
    GRADIENT = "gradient"


class PanelStyle(str, Enum):
    CARD = "card"  # opaque white bordered card
    GLASS = "glass"  # borderless translucent panel


class RowStyle(str, Enum):
    BORDERED = "bordered"  # opaque bordered row
    GLASS = "glass"  # translucent blurred row with light border


@dataclass(frozen=True)
class Background:
    kind: BackgroundKind
    color: Optional[str] = None
    color_from: Optional[str] = None
    color_to: Optional[str] = None

    def css(self) -> str:
        """Style-attribute declaration; every color here already passed safe_hex_color."""
        if self.kind is BackgroundKind.SOLID:
            return f"background: {self.color};"
        if self.kind is BackgroundKind.GRADIENT:
            return f"background: linear-gradient(to bottom, {self.color_from}, {self.color_to});"
        return ""

    @property
    def colors(self) -> tuple[str, ...]:
        if self.kind is BackgroundKind.GRADIENT:
            return (self.color_from, self.color_to)
        return (self.color,) if self.color else ()


@dataclass(frozen=True)
class ThemeVariant:
    name: ThemeName
    background: Background
    text_color: str
    accent_color: str
    panel_style: PanelStyle
    row_style: RowStyle

    @property
    def full_bleed(self) -> bool:
        return self.name in FULL_BLEED_THEMES

    @property
    def css_class(self) -> str:
        return f"theme-{self.name.value}"

    def page_style(self) -> str:
        return f"{self.background.css()} color: {self.text_color}; --accent: {self.accent_color};".strip()


def _hex_to_rgb_tuple(value: str) -> tuple[int, int, int]:
    v = value.lstrip("#")
    return int(v[0:2], 16), int(v[2:4], 16), int(v[4:6], 16)


def _luminance(value: str) -> float:
    r, g, b = _hex_to_rgb_tuple(value)
    return 0.299 * r + 0.587 * g + 0.114 * b


def _pick_text_color(*colors: str) -> str:
    """Text color readable on the mean luminance of the given background stops."""
    luminance = sum(_luminance(c) for c in colors) / len(colors)
    return ON_LIGHT_TEXT_COLOR if luminance > 140 else ON_DARK_TEXT_COLOR


def _full_bleed_background(
    name: ThemeName,
    theme_color: str | None,
    gradient_from: str | None,
    gradient_to: str | None,
) -> Background:
    if name is ThemeName.DARK:
        return Background(BackgroundKind.SOLID, color=safe_hex_color(theme_color, DEFAULT_DARK_COLOR))
    base = safe_hex_color(theme_color, DEFAULT_THEME_COLOR)
    if name is ThemeName.GRADIENT:
        start = safe_hex_color(gradient_from, "")
        end = safe_hex_color(gradient_to, "")
        if start and end:
            return Background(BackgroundKind.GRADIENT, color_from=start, color_to=end)
        # one malformed endpoint: solid fill with the gradient-to fallback
        return Background(BackgroundKind.SOLID, color=safe_hex_color(gradient_to, base))
    return Background(BackgroundKind.SOLID, color=base)


def resolve_theme(
    theme: Any = None,
    theme_color: str | None = None,
    gradient_from: str | None = None,
    gradient_to: str | None = None,
) -> ThemeVariant:
    name = ThemeName.parse(theme)
    accent = safe_hex_color(theme_color, DEFAULT_THEME_COLOR)
    if name not in FULL_BLEED_THEMES:
        return ThemeVariant(
            name=ThemeName.LIGHT,
            background=Background(BackgroundKind.NONE),
            text_color=LIGHT_TEXT_COLOR,
            accent_color=accent,
            panel_style=PanelStyle.CARD,
            row_style=RowStyle.BORDERED,
        )
    background = _full_bleed_background(name, theme_color, gradient_from, gradient_to)
    return ThemeVariant(
        name=name,
        background=background,
        text_color=_pick_text_color(*(background.colors or (DEFAULT_THEME_COLOR,))),
        accent_color=accent,
        panel_style=PanelStyle.GLASS,
        row_style=RowStyle.GLASS,
    )


def resolve_profile_theme(profile: Profile) -> ThemeVariant:
    return resolve_theme(
        profile.theme,
        profile.theme_color,
        profile.theme_gradient_from,
        profile.theme_gradient_to,
    )
