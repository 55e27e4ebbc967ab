"""Command-line front door for tagview.

Reads a container snapshot, builds the container listing for a scope, and
prints it the way a view would show it.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import load_settings
from .content import ContainerContent
from .errors import ScopeError
from .registry import TagRegistry
from .render import render_view
from .scope import Settings, StaticScopeResolver
from .ui_theme import available_theme_names, resolve_theme
from .view import ContentView


def _quick_select(value: str) -> str:
    """argparse type for a non-empty quick-select character set."""
    stripped = value.strip()
    if not stripped:
        raise argparse.ArgumentTypeError("quick-select keys must not be empty")
    return stripped


def read_snapshot(source: str) -> dict[str, object]:
    """Read a ``{container id: [tag paths]}`` JSON object from a path or ``-``."""
    if source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid snapshot JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit("Snapshot must be a JSON object mapping container ids to tag lists.")
    return data


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the container listing.

    Display settings default to the config file; ``--scope`` defaults to the
    current working directory.
    """
    parser = argparse.ArgumentParser(description="List tag containers the way the container view shows them.")
    parser.add_argument("snapshot", help="JSON file mapping container ids to tag paths ('-' for stdin).")
    parser.add_argument("--scope", default=None, help="Current scope id (default: current directory).")
    parser.add_argument("--title", default=None, help="Title printed above the listing.")
    parser.add_argument("--quick-select", type=_quick_select, default=None, help="Quick-select characters.")
    parser.add_argument("--no-status", action="store_true", help="Do not highlight the current scope.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    configured = load_settings()
    settings = Settings(
        status=configured.status and not args.no_status,
        quick_select=args.quick_select or configured.quick_select,
    )

    registry = TagRegistry()
    registry.load_snapshot(read_snapshot(args.snapshot))

    scope_id = args.scope if args.scope is not None else str(Path.cwd())
    title = args.title
    content = ContainerContent(
        registry,
        StaticScopeResolver(scope_id, settings),
        title_fn=(lambda: title) if title else None,
    )

    no_color = args.no_color or not sys.stdout.isatty()
    view = ContentView(content)
    try:
        view.open()
    except ScopeError as exc:
        raise SystemExit(str(exc)) from exc
    try:
        sys.stdout.write(render_view(view, resolve_theme(args.theme, no_color=no_color)))
    finally:
        view.close()


if __name__ == "__main__":
    main()
