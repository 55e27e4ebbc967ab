"""Path display helpers for container ids."""

from __future__ import annotations

import os
from pathlib import Path


def is_absolute(value: str) -> bool:
    """Return whether ``value`` looks like an absolute filesystem path."""
    return bool(value) and os.path.isabs(value)


def home_relative(value: str, home: Path | None = None) -> str:
    """Abbreviate ``value`` with ``~`` when it lives under the home directory.

    Paths outside the home directory are returned unchanged. The home
    directory itself renders as ``~``.
    """
    home_dir = str(home if home is not None else Path.home()).rstrip(os.sep)
    if not home_dir:
        return value
    if value == home_dir:
        return "~"
    if value.startswith(home_dir + os.sep):
        return "~" + value[len(home_dir):]
    return value
