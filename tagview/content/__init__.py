"""Content variants a :class:`tagview.view.ContentView` can display."""

from __future__ import annotations

from .base import Content
from .container import ContainerContent, ContainerData, ContainerEntity
from .types import (
    CURRENT_HIGHLIGHT,
    Action,
    ActionOptions,
    Decoration,
    Entry,
    Highlight,
    SignMarker,
    TrailingAnnotation,
)

__all__ = [
    "Action",
    "ActionOptions",
    "CURRENT_HIGHLIGHT",
    "ContainerContent",
    "ContainerData",
    "ContainerEntity",
    "Content",
    "Decoration",
    "Entry",
    "Highlight",
    "SignMarker",
    "TrailingAnnotation",
]
