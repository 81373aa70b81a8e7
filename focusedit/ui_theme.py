"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (tree/status chrome). Syntax colors for the
editor pane come from the highlight rule sets.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    tree_dir: str
    tree_file: str
    tree_focus_marker: str
    status_ok: str
    status_error: str
    status_dirty: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_focus_marker="\033[38;5;44m",
    status_ok="\033[38;5;250m",
    status_error="\033[1;38;5;203m",
    status_dirty="\033[38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;153m",
    tree_focus_marker="\033[38;5;39m",
    status_ok="\033[38;5;110m",
    status_error="\033[1;38;5;210m",
    status_dirty="\033[38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    tree_dir="",
    tree_file="",
    tree_focus_marker="",
    status_ok="",
    status_error="",
    status_dirty="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the named theme, falling back to the default for unknown names."""
    if no_color:
        return PLAIN_THEME
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
