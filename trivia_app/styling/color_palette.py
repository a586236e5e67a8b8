"""Color palette for the trivia pages supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from trivia_app.core.models import ResultTier


class Theme(Enum):
    """Page theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the pages."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#4B5563", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3F4F6", dark="#2D2D2D")
    BACKGROUND_HERO = ThemeColors(light="#DBEAFE", dark="#1E293B")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#111827", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_HOVER_BG = ThemeColors(light="#E5E7EB", dark="#505050")

    PROGRESS_FILL = ThemeColors(light="#111827", dark="#4A9EFF")
    EXPLANATION_BG = ThemeColors(light="#EFF6FF", dark="#252525")

    # Difficulty cards, easiest first
    DIFFICULTY_BACKGROUNDS = (
        ThemeColors(light="#DCFCE7", dark="#14532D"),
        ThemeColors(light="#FEF9C3", dark="#713F12"),
        ThemeColors(light="#FFEDD5", dark="#7C2D12"),
        ThemeColors(light="#FEE2E2", dark="#7F1D1D"),
    )

    SUCCESS = ThemeColors(light="#166534", dark="#6FCF6F")
    SUCCESS_BG = ThemeColors(light="#DCFCE7", dark="#14532D")
    WARNING = ThemeColors(light="#854D0E", dark="#FFC83D")
    WARNING_BG = ThemeColors(light="#FEF9C3", dark="#713F12")
    ERROR = ThemeColors(light="#991B1B", dark="#FF6B6B")
    ERROR_BG = ThemeColors(light="#FEE2E2", dark="#7F1D1D")

    @classmethod
    def for_result_tier(cls, tier: ResultTier) -> tuple[ThemeColors, ThemeColors]:
        """Return (text, background) colors for a result tier."""
        if tier is ResultTier.CONGRATS:
            return cls.SUCCESS, cls.SUCCESS_BG
        if tier is ResultTier.CLOSE:
            return cls.WARNING, cls.WARNING_BG
        return cls.ERROR, cls.ERROR_BG
