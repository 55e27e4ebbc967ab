"""Scope resolution boundary and display settings.

How a scope id is derived (cwd, git root, ...) belongs to the resolver; this
module only defines what content providers consume from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .errors import ScopeError

DEFAULT_QUICK_SELECT = "123456789"


@dataclass(frozen=True)
class Settings:
    """Display settings shared by content providers."""

    status: bool = True
    quick_select: str = DEFAULT_QUICK_SELECT

    def quick_select_keys(self) -> list[str]:
        """Return quick-select characters ordered by 0-based list position."""
        return list(self.quick_select)


@dataclass(frozen=True)
class Scope:
    """A resolved scope: the container id it maps to plus its scope name."""

    id: str
    name: str = "static"


class ScopeResolver(Protocol):
    settings: Settings

    def current_scope(self) -> Scope:
        """Return the active scope or raise :class:`ScopeError`."""
        ...


class StaticScopeResolver:
    """Resolver that always reports the same scope id."""

    def __init__(self, scope_id: str, settings: Settings | None = None, name: str = "static") -> None:
        self.scope_id = scope_id
        self.name = name
        self.settings = settings if settings is not None else Settings()

    def current_scope(self) -> Scope:
        if not self.scope_id:
            raise ScopeError(f"scope {self.name!r} did not resolve to an id")
        return Scope(id=self.scope_id, name=self.name)
