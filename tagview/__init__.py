"""Public package surface for tagview.

Exports ``main`` for programmatic CLI invocation and the container content
provider used by view hosts.
"""

from __future__ import annotations

from .content import ContainerContent, Content
from .view import ContentView


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "Content", "ContainerContent", "ContentView"]
