"""Theme colours, sizes and insets, stored in an environment mapping."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

_U32_MAX = 0xFFFF_FFFF

THEME_COL_ABILITY_STRENGTH = "charsheet5e.env.theme-col-ability-strength"
THEME_COL_ABILITY_DEXTERITY = "charsheet5e.env.theme-col-ability-dexterity"
THEME_COL_ABILITY_CONSTITUTION = "charsheet5e.env.theme-col-ability-constitution"
THEME_COL_ABILITY_INTELLIGENCE = "charsheet5e.env.theme-col-ability-intelligence"
THEME_COL_ABILITY_WISDOM = "charsheet5e.env.theme-col-ability-wisdom"
THEME_COL_ABILITY_CHARISMA = "charsheet5e.env.theme-col-ability-charisma"

THEME_SIZE_TITLE = "charsheet5e.env.theme-size-title"
THEME_SIZE_H1 = "charsheet5e.env.theme-size-h1"
THEME_SIZE_SMALL_LABEL = "charsheet5e.env.theme-size-label"
THEME_INSETS = "charsheet5e.env.theme-insets"

BUTTON_BORDER_RADIUS = "theme.button-border-radius"
TEXTBOX_BORDER_RADIUS = "theme.textbox-border-radius"
BACKGROUND_DARK = "theme.background-dark"
BACKGROUND_LIGHT = "theme.background-light"
WINDOW_BACKGROUND_COLOR = "theme.window-background-color"
BORDER_DARK = "theme.border-dark"
FOREGROUND_LIGHT = "theme.foreground-light"
FOREGROUND_DARK = "theme.foreground-dark"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_rgba32(cls, value: int) -> Color:
        """Build a colour from a packed ``0xRRGGBBAA`` value."""
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"not a 32-bit colour: {value:#x}")
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_rgba32(self) -> int:
        """Return the colour packed as ``0xRRGGBBAA``."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a


@dataclass(frozen=True)
class Insets:
    """Padding on the left, top, right and bottom of a widget."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def uniform_xy(cls, x: float, y: float) -> Insets:
        """Return insets of ``x`` on both sides and ``y`` above and below."""
        return cls(x, y, x, y)


def config_env_defaults(env: MutableMapping[str, Any]) -> None:
    """Fill ``env`` with the default theme.

    The button border radius is copied from the text-box border radius, which
    must already be set; KeyError is raised otherwise.
    """
    env[THEME_COL_ABILITY_STRENGTH] = Color.from_rgba32(0x9E2835FF)
    env[THEME_COL_ABILITY_DEXTERITY] = Color.from_rgba32(0x265C42FF)
    env[THEME_COL_ABILITY_CONSTITUTION] = Color.from_rgba32(0xBE4A2FFF)
    env[THEME_COL_ABILITY_INTELLIGENCE] = Color.from_rgba32(0x124E89FF)
    env[THEME_COL_ABILITY_WISDOM] = Color.from_rgba32(0x5A6988FF)
    env[THEME_COL_ABILITY_CHARISMA] = Color.from_rgba32(0x68386CFF)

    env[THEME_SIZE_TITLE] = 28.0
    env[THEME_SIZE_H1] = 20.0
    env[THEME_SIZE_SMALL_LABEL] = 12.0

    env[THEME_INSETS] = Insets.uniform_xy(8.0, 6.0)

    _override_style(env)
    _override_colours(env)


def _override_style(env: MutableMapping[str, Any]) -> None:
    if TEXTBOX_BORDER_RADIUS not in env:
        raise KeyError(f"environment has no value for {TEXTBOX_BORDER_RADIUS!r}")
    env[BUTTON_BORDER_RADIUS] = env[TEXTBOX_BORDER_RADIUS]


def _override_colours(env: MutableMapping[str, Any]) -> None:
    env[BACKGROUND_DARK] = Color.from_rgba32(0x000000FF)
    env[BACKGROUND_LIGHT] = Color.from_rgba32(0x181818FF)
    env[WINDOW_BACKGROUND_COLOR] = Color.from_rgba32(0x0E0E0EFF)
    env[BORDER_DARK] = Color.from_rgba32(0x2F2F2FFF)
    env[FOREGROUND_LIGHT] = Color.from_rgba32(0xD2D2D2FF)
    env[FOREGROUND_DARK] = Color.from_rgba32(0x6C6C6CFF)