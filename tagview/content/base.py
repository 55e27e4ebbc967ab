"""Capability contract a view host expects from any content variant."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from .types import Action, ActionOptions, Entry


@runtime_checkable
class Content(Protocol):
    """Supplies rows to a view, decorates them, and maps edited rows back.

    The host calls ``entities`` once per render pass, then ``create_entry``
    once per entity with its 1-based position. ``parse_line`` only ever sees
    lines produced by the same content's ``create_entry``.
    """

    def modifiable(self) -> bool: ...

    def minimum_column(self, line: str) -> int: ...

    def title(self) -> str | None: ...

    def attach(self, view: Any) -> None: ...

    def detach(self, view: Any) -> None: ...

    def sync(self, original: Entry, parsed: Entry) -> None: ...

    def entities(self) -> list[Any]: ...

    def create_entry(self, entity: Any, index: int) -> Entry: ...

    def parse_line(self, line: str, original_entries: Sequence[Entry]) -> Entry: ...

    def perform(self, action: Action, options: ActionOptions | None = None) -> Any: ...
