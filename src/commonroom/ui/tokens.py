"""Design tokens for spacing, sizing and typography.

Usage:
    from commonroom.ui.tokens import spacing, typography, sizing

    layout.setContentsMargins(spacing.lg, spacing.md, spacing.lg, spacing.md)
    label.setStyleSheet(f"font-size: {typography.title}pt;")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpacingTokens:
    """Spacing scale based on a 4px base unit."""

    xs: int = 2  # Margins, small gaps
    sm: int = 4  # Between label and control
    md: int = 8  # Card padding
    lg: int = 12  # Between cards
    xl: int = 20  # Window padding


@dataclass(frozen=True)
class TypographyTokens:
    """Font size scale in points."""

    caption: int = 9  # Slider values
    body: int = 11  # Default body text
    title: int = 14  # Sound names


@dataclass(frozen=True)
class SizingTokens:
    """Widget sizing constants in pixels."""

    border_radius_lg: int = 18  # Sound cards
    control_button: int = 40  # Play toggle
    value_label: int = 44  # Percent / seconds readout
    slider_min: int = 140  # Slider minimum width
    window_min_width: int = 360


# Module-level singletons, import these in widgets
spacing = SpacingTokens()
typography = TypographyTokens()
sizing = SizingTokens()
