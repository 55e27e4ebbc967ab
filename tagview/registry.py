"""In-memory tag containers keyed by scope id.

The registry owns containers; content providers only read them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


class TagContainer:
    """Ordered, duplicate-free list of tag paths belonging to one scope."""

    def __init__(self, id: str, tags: Iterable[str] = ()) -> None:
        self.id = id
        self.tags: list[str] = []
        for path in tags:
            self.insert(path)

    def __len__(self) -> int:
        return len(self.tags)

    def __repr__(self) -> str:
        return f"TagContainer(id={self.id!r}, tags={len(self.tags)})"

    def has(self, path: str) -> bool:
        return path in self.tags

    def insert(self, path: str) -> None:
        """Append ``path`` unless it is already tagged."""
        if path in self.tags:
            return
        self.tags.append(path)

    def remove(self, path: str) -> None:
        """Drop ``path`` if present."""
        if path in self.tags:
            self.tags.remove(path)


class TagRegistry:
    """Mapping from container id to :class:`TagContainer`.

    Ids are case-sensitive, so ``"/Project"`` and ``"/project"`` are two
    containers.
    """

    def __init__(self) -> None:
        self.containers: dict[str, TagContainer] = {}

    def __len__(self) -> int:
        return len(self.containers)

    def get(self, id: str) -> TagContainer | None:
        return self.containers.get(id)

    def ensure(self, id: str) -> TagContainer:
        """Return the container for ``id``, creating an empty one when missing."""
        container = self.containers.get(id)
        if container is None:
            container = TagContainer(id)
            self.containers[id] = container
        return container

    def remove(self, id: str) -> TagContainer | None:
        return self.containers.pop(id, None)

    def load_snapshot(self, snapshot: Mapping[str, object]) -> None:
        """Populate containers from a ``{id: [tag paths]}`` mapping.

        Entries whose tag list is not a list of strings are skipped. Existing
        containers with the same id gain the new tags.
        """
        for id, raw_tags in snapshot.items():
            if not isinstance(id, str) or not id:
                continue
            if not isinstance(raw_tags, list):
                logger.debug("skipping container %r: tags are not a list", id)
                continue
            container = self.ensure(id)
            for path in raw_tags:
                if isinstance(path, str) and path:
                    container.insert(path)
        logger.debug("registry holds %d containers", len(self.containers))
