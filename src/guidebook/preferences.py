"""Display preference (light/dark theme) resolution.

The preference is a single named value, ``light`` or ``dark``. Resolution
order:
1. Stored value (cookie) if valid
2. Ambient system preference (``Sec-CH-Prefers-Color-Scheme`` client hint)
3. Fixed default
"""

from __future__ import annotations

from typing import Literal

Theme = Literal["light", "dark"]

THEMES: tuple[str, ...] = ("light", "dark")
DEFAULT_THEME: Theme = "light"
THEME_COOKIE = "guidebook-theme"
PREFERS_COLOR_SCHEME_HEADER = "Sec-CH-Prefers-Color-Scheme"


def is_valid_theme(value: str | None) -> bool:
    return value in THEMES


def resolve_theme(
    stored: str | None,
    prefers_color_scheme: str | None = None,
    default: str = DEFAULT_THEME,
) -> str:
    """Pick the theme to display.

    Args:
        stored: Persisted preference, may be missing or garbage
        prefers_color_scheme: Ambient system signal, if the client sent one
        default: Fallback when neither is usable

    Returns:
        "light" or "dark"
    """
    if is_valid_theme(stored):
        return stored
    if prefers_color_scheme:
        hint = prefers_color_scheme.strip().strip('"').lower()
        if is_valid_theme(hint):
            return hint
    return default if is_valid_theme(default) else DEFAULT_THEME


def toggle_theme(current: str | None) -> str:
    """Return the opposite theme. A missing value counts as dark."""
    current = current or "dark"
    return "light" if current == "dark" else "dark"
