"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes for the light and dark modes
- Which Textual theme and code highlighting style a ThemeMode maps to

To restyle a mode, change only this file.
"""

from textual.theme import Theme

from ..config.theme import ThemeMode
from .config import CODE_THEME_DARK, CODE_THEME_LIGHT

# Deep navy with teal and gold accents
TAXASSIST_DARK = Theme(
    name="taxassist-dark",
    primary="#2dd4bf",      # Teal - main accent
    secondary="#60a5fa",    # Blue - secondary accent
    accent="#fbbf24",       # Gold - highlights
    foreground="#e2e8f0",
    background="#0b1120",
    success="#4ade80",
    warning="#fb923c",
    error="#f87171",
    surface="#111827",
    panel="#0f172a",
    dark=True,
    variables={
        "block-cursor-foreground": "#0b1120",
        "block-cursor-background": "#2dd4bf",
        "block-cursor-text-style": "bold",
        "input-selection-background": "#2dd4bf 30%",
        "border": "#334155",
        "border-blurred": "#1e293b",
        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#2dd4bf",
        "footer-key-foreground": "#fbbf24",
        "text-muted": "#64748b",
        "link-color": "#2dd4bf",
        "link-style": "underline",
    },
)

# Paper white with the same accents, darkened for contrast
TAXASSIST_LIGHT = Theme(
    name="taxassist-light",
    primary="#0f766e",
    secondary="#1d4ed8",
    accent="#b45309",
    foreground="#1e293b",
    background="#f8fafc",
    success="#15803d",
    warning="#c2410c",
    error="#b91c1c",
    surface="#ffffff",
    panel="#f1f5f9",
    dark=False,
    variables={
        "block-cursor-foreground": "#ffffff",
        "block-cursor-background": "#0f766e",
        "block-cursor-text-style": "bold",
        "input-selection-background": "#0f766e 25%",
        "border": "#cbd5e1",
        "border-blurred": "#e2e8f0",
        "scrollbar": "#e2e8f0",
        "scrollbar-hover": "#cbd5e1",
        "scrollbar-active": "#0f766e",
        "footer-key-foreground": "#b45309",
        "text-muted": "#64748b",
        "link-color": "#0f766e",
        "link-style": "underline",
    },
)

THEMES = (TAXASSIST_DARK, TAXASSIST_LIGHT)


def theme_name(mode: ThemeMode) -> str:
    return TAXASSIST_LIGHT.name if mode is ThemeMode.LIGHT else TAXASSIST_DARK.name


def code_theme(mode: ThemeMode) -> str:
    return CODE_THEME_LIGHT if mode is ThemeMode.LIGHT else CODE_THEME_DARK
