"""Minimal view host that drives a :class:`Content` through its lifecycle.

The view owns the text surface (``lines`` and ``decorations``) and calls the
content in strict sequence: attach, entities, create_entry per entity, and
later parse_line/sync/perform on behalf of the user.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .content.base import Content
from .content.types import Action, ActionOptions, Decoration, Entry
from .errors import ViewStateError

logger = logging.getLogger(__name__)


class ContentView:
    """Stateful text surface backed by one content variant."""

    def __init__(self, content: Content) -> None:
        self.content = content
        self.is_open = False
        self.entries: list[Entry] = []
        self.lines: list[str] = []
        self.decorations: list[Decoration] = []

    def open(self) -> None:
        """Attach the content and render it.

        If attaching or the first render raises, the view stays closed (the
        content is detached again when it had been attached) and the
        exception propagates to the caller.
        """
        if self.is_open:
            return
        self.content.attach(self)
        self.is_open = True
        logger.debug("attached %s", type(self.content).__name__)
        try:
            self.render()
        except BaseException:
            self.close()
            raise

    def close(self) -> None:
        if not self.is_open:
            return
        self.content.detach(self)
        self.is_open = False
        self.entries = []
        self.lines = []
        self.decorations = []
        logger.debug("detached %s", type(self.content).__name__)

    def _require_open(self) -> None:
        if not self.is_open:
            raise ViewStateError("view is not open")

    def title(self) -> str | None:
        return self.content.title()

    def render(self) -> None:
        """Rebuild entries, lines, and decorations from the content."""
        self._require_open()
        entities = self.content.entities()
        entries = [self.content.create_entry(entity, index) for index, entity in enumerate(entities, start=1)]

        self.entries = entries
        self.lines = [entry.line for entry in entries]
        self.decorations = [decoration for entry in entries for decoration in entry.decorations]
        logger.debug("rendered %d entries", len(entries))

    def entry_at(self, row: int) -> Entry | None:
        """Return the entry rendered on 0-based ``row`` or ``None``."""
        if 0 <= row < len(self.entries):
            return self.entries[row]
        return None

    def clamp_column(self, row: int, col: int) -> int:
        """Clamp a cursor column so it never lands inside the read-only prefix."""
        line = self.lines[row] if 0 <= row < len(self.lines) else ""
        return max(col, self.content.minimum_column(line))

    def parse(self, lines: Sequence[str] | None = None) -> list[Entry]:
        """Map (possibly edited) lines back to structured entries."""
        self._require_open()
        source = self.lines if lines is None else lines
        return [self.content.parse_line(line, self.entries) for line in source if line]

    def sync(self, lines: Sequence[str] | None = None) -> list[Entry]:
        """Reconcile edited lines with the entries they were rendered from."""
        parsed_entries = self.parse(lines)
        for parsed in parsed_entries:
            original = self.entries[parsed.index - 1]
            self.content.sync(original, parsed)
        return parsed_entries

    def perform(self, action: Action, options: ActionOptions | None = None) -> Any:
        """Run ``action`` through the content, defaulting options to this view."""
        if options is None:
            options = ActionOptions(view=self)
        return self.content.perform(action, options)

    def perform_at(self, row: int, action: Action) -> Any:
        """Run ``action`` for the entry on ``row`` with its id in the options."""
        self._require_open()
        parsed = self.content.parse_line(self.lines[row], self.entries)
        entry_id = getattr(parsed.data, "id", None)
        return self.perform(action, ActionOptions(view=self, id=entry_id))
