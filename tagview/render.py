"""Plain-text rendering of an open :class:`ContentView`.

Each row is ``<sign gutter><line> <annotation>``; decorations are drawn
beside the text and never become part of it.
"""

from __future__ import annotations

from pygments.console import ansiformat

from .content.types import SignMarker, TrailingAnnotation
from .ui_theme import DEFAULT_THEME, UITheme
from .view import ContentView

SIGN_COLUMN_WIDTH = 2


def _styled(attr: str, text: str) -> str:
    if not attr or not text:
        return text
    return ansiformat(attr, text)


def render_row(line: str, signs: list[SignMarker], annotations: list[TrailingAnnotation], theme: UITheme) -> str:
    """Render one view line with its sign gutter and trailing annotations."""
    if signs:
        sign = signs[-1]
        sign_text = sign.text[:SIGN_COLUMN_WIDTH].ljust(SIGN_COLUMN_WIDTH)
        gutter = _styled(theme.highlight_attr(sign.highlight), sign_text)
    else:
        gutter = " " * SIGN_COLUMN_WIDTH

    parts = [gutter + line]
    for annotation in annotations:
        parts.append(_styled(theme.annotation, annotation.text))
    return " ".join(parts)


def render_view(view: ContentView, theme: UITheme = DEFAULT_THEME) -> str:
    """Render every line of ``view`` (plus its title, when set) as text."""
    signs_by_line: dict[int, list[SignMarker]] = {}
    annotations_by_line: dict[int, list[TrailingAnnotation]] = {}
    for decoration in view.decorations:
        if isinstance(decoration, SignMarker):
            signs_by_line.setdefault(decoration.line, []).append(decoration)
        elif isinstance(decoration, TrailingAnnotation):
            annotations_by_line.setdefault(decoration.line, []).append(decoration)

    out: list[str] = []
    title = view.title()
    if title:
        out.append(_styled(theme.title, title))
    for row, line in enumerate(view.lines):
        out.append(
            render_row(
                line,
                signs_by_line.get(row, []),
                annotations_by_line.get(row, []),
                theme,
            )
        )
    return "".join(f"{row}\n" for row in out)
