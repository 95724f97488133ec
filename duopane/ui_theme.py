"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (header/selection/chrome). Syntax highlighting
style for file excerpts remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    header: str
    divider: str
    selected: str
    preview: str
    footer: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;34m",
    divider="\033[2m",
    selected="\033[36m",
    preview="\033[90m",
    footer="\033[90m",
    error="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    divider="\033[2;38;5;31m",
    selected="\033[38;5;81m",
    preview="\033[38;5;153m",
    footer="\033[2;38;5;110m",
    error="\033[38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    divider="",
    selected="",
    preview="",
    footer="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
