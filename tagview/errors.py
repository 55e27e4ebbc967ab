"""Exception types raised by tagview components."""

from __future__ import annotations


class TagviewError(Exception):
    """Base class for recoverable tagview failures."""


class ScopeError(TagviewError):
    """The active scope could not be resolved."""


class ViewStateError(TagviewError):
    """A view was driven out of order (for example rendered before opening)."""


class ContentContractError(AssertionError):
    """A line handed back to a content provider was not one it rendered.

    Hosts only permit edits past the index prefix, so a missing or unknown
    index means the host broke its contract. Callers should not catch this.
    """
