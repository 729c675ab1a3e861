"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the viewer chrome and for search-hit
highlighting. ``--no-color`` always resolves to the plain palette.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    header: str
    header_prompt: str
    body: str
    search_hit: str
    footer: str
    status: str
    divider: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;36m",
    header_prompt="\033[1;33m",
    body="\033[37m",
    search_hit="\033[30;43m",
    footer="\033[33m",
    status="\033[32m",
    divider="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    header_prompt="\033[1;38;5;215m",
    body="\033[38;5;252m",
    search_hit="\033[38;5;16;48;5;153m",
    footer="\033[2;38;5;110m",
    status="\033[38;5;84m",
    divider="\033[2;38;5;31m",
)

# Search hits stay visible without color through reverse video.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    header="",
    header_prompt="",
    body="",
    search_hit="\033[7m",
    footer="",
    status="",
    divider="",
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
