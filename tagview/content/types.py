"""Entry and decoration datatypes exchanged between contents and view hosts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Union

CURRENT_HIGHLIGHT = "TagviewCurrent"


@dataclass(frozen=True)
class SignMarker:
    """Gutter sign shown left of a line (quick-select character)."""

    text: str
    highlight: str | None = None
    line: int = 0
    col: int = 0
    kind: str = "sign"


@dataclass(frozen=True)
class TrailingAnnotation:
    """Virtual text rendered after the line content, never part of the text."""

    text: str
    position: str = "eol"
    line: int = 0
    col: int = 0
    kind: str = "annotation"


Decoration = Union[SignMarker, TrailingAnnotation]


@dataclass(frozen=True)
class Highlight:
    """Highlight group applied to ``[start_col, end_col)`` of one line."""

    group: str
    line: int
    start_col: int
    end_col: int


@dataclass
class Entry:
    """One rendered line plus the structured data it stands for."""

    data: Any
    line: str
    index: int
    min_col: int
    highlights: list[Highlight] = field(default_factory=list)
    decorations: list[Decoration] = field(default_factory=list)


@dataclass(frozen=True)
class ActionOptions:
    """Options handed to an action by :meth:`Content.perform`."""

    view: Any = None
    id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


Action = Callable[[Optional[ActionOptions]], Any]
