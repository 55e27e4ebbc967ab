"""Content variant listing every tag container, one line per container.

Lines look like ``/003 ~/projects/app``: a fixed ``/NNN `` index prefix that
the host keeps read-only, followed by the container id.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ..errors import ContentContractError
from ..paths import home_relative, is_absolute
from ..registry import TagContainer, TagRegistry
from ..scope import ScopeResolver
from .types import (
    CURRENT_HIGHLIGHT,
    Action,
    ActionOptions,
    Decoration,
    Entry,
    SignMarker,
    TrailingAnnotation,
)

INDEX_PREFIX_RE = re.compile(r"^/([0-9]+)")

# "/000 " is five characters wide
MINIMUM_COLUMN = 5

HookFn = Callable[[Any], None]
TitleFn = Callable[[], "str | None"]


@dataclass(frozen=True)
class ContainerEntity:
    """A container paired with whether it belongs to the current scope."""

    container: TagContainer
    current: bool


@dataclass(frozen=True)
class ContainerData:
    """Structured payload carried by a container entry."""

    id: str


def index_token(index: int) -> str:
    """Return the ``/NNN`` token for a 1-based index (wider above 999)."""
    return f"/{index:03d}"


def tag_count_text(count: int) -> str:
    noun = "tag" if count == 1 else "tags"
    return f"[{count} {noun}]"


class ContainerContent:
    """Read-only listing of the containers held by a :class:`TagRegistry`."""

    def __init__(
        self,
        registry: TagRegistry,
        resolver: ScopeResolver,
        hook_fn: HookFn | None = None,
        title_fn: TitleFn | None = None,
        abbreviate: Callable[[str], str] = home_relative,
    ) -> None:
        self.registry = registry
        self.resolver = resolver
        self.hook_fn = hook_fn
        self.title_fn = title_fn
        self.abbreviate = abbreviate

    def modifiable(self) -> bool:
        return False

    def minimum_column(self, line: str) -> int:
        """Return the first editable 0-indexed column, whatever the line holds."""
        return MINIMUM_COLUMN

    def title(self) -> str | None:
        if self.title_fn is None:
            return None
        return self.title_fn()

    def attach(self, view: Any) -> None:
        """Run the attach hook, letting any exception it raises abort attaching."""
        if self.hook_fn is not None:
            self.hook_fn(view)

    def detach(self, view: Any) -> None:
        pass

    def sync(self, original: Entry, parsed: Entry) -> None:
        pass

    def entities(self) -> list[ContainerEntity]:
        """Return containers sorted case-insensitively by id.

        Raises whatever the scope resolver raises when no current scope can
        be determined.
        """
        current_scope = self.resolver.current_scope()

        containers = sorted(self.registry.containers.values(), key=lambda c: c.id.lower())
        return [
            ContainerEntity(container=container, current=container.id == current_scope.id)
            for container in containers
        ]

    def display_id(self, container_id: str) -> str:
        # Ids such as "global" are names, not paths
        if is_absolute(container_id):
            return self.abbreviate(container_id)
        return container_id

    def create_entry(self, entity: ContainerEntity, index: int) -> Entry:
        container = entity.container
        line = f"{index_token(index)} {self.display_id(container.id)}"
        min_col = line.index(" ")

        decorations: list[Decoration] = []

        quick_select = self.resolver.settings.quick_select_keys()
        if 1 <= index <= len(quick_select):
            highlight = None
            if self.resolver.settings.status and entity.current:
                highlight = CURRENT_HIGHLIGHT
            decorations.append(
                SignMarker(text=quick_select[index - 1], highlight=highlight, line=index - 1, col=0)
            )

        decorations.append(TrailingAnnotation(text=tag_count_text(len(container)), line=index - 1, col=0))

        return Entry(
            data=ContainerData(id=container.id),
            line=line,
            index=index,
            min_col=min_col,
            highlights=[],
            decorations=decorations,
        )

    def parse_line(self, line: str, original_entries: Sequence[Entry]) -> Entry:
        """Recover a copy of the entry whose index prefixes ``line``.

        Everything after the prefix is ignored. Raises
        :class:`ContentContractError` when the prefix is missing or names no
        original entry.
        """
        match = INDEX_PREFIX_RE.match(line)
        if match is None:
            raise ContentContractError(f"line has no index prefix: {line!r}")

        index = int(match.group(1))
        if not 1 <= index <= len(original_entries):
            raise ContentContractError(f"index {index} outside {len(original_entries)} rendered entries")

        return copy.deepcopy(original_entries[index - 1])

    def perform(self, action: Action, options: ActionOptions | None = None) -> Any:
        return action(options)
