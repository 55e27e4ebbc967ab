"""UI theme definitions and selection helpers.

Themes map rendered parts of a view (signs, annotations, title) to
``pygments.console`` attribute strings such as ``"*yellow*"`` (bold) or
``"brightblack"``. An empty attribute leaves the text uncolored.
"""

from __future__ import annotations

from dataclasses import dataclass

from .content.types import CURRENT_HIGHLIGHT


@dataclass(frozen=True)
class UITheme:
    """Semantic palette used by the text renderer."""

    name: str
    title: str
    sign: str
    sign_current: str
    annotation: str

    def highlight_attr(self, group: str | None) -> str:
        """Return the attribute string for a content highlight group."""
        if group == CURRENT_HIGHLIGHT:
            return self.sign_current
        return self.sign


DEFAULT_THEME = UITheme(
    name="default",
    title="*brightcyan*",
    sign="brightblack",
    sign_current="*yellow*",
    annotation="gray",
)

OCEAN_THEME = UITheme(
    name="ocean",
    title="*blue*",
    sign="cyan",
    sign_current="*brightcyan*",
    annotation="brightblue",
)

PLAIN_THEME = UITheme(
    name="plain",
    title="",
    sign="",
    sign_current="",
    annotation="",
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
