"""CLI tests: snapshot input, scope selection, and settings overrides."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pygments.console import ansiformat

from tagview import cli
from tagview.ui_theme import DEFAULT_THEME


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        patcher = mock.patch("tagview.config.CONFIG_PATH", self.root / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def _snapshot(self, data: object) -> Path:
        path = self.root / "tags.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def _run(self, argv: list[str]) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(argv)
        return stdout.getvalue()

    def test_prints_sorted_listing(self) -> None:
        snapshot = self._snapshot({"global": ["/a", "/b"], "/srv/app": ["/srv/app/x"]})
        output = self._run([str(snapshot), "--scope", "global"])
        self.assertEqual(output, "1 /001 /srv/app [1 tag]\n2 /002 global [2 tags]\n")

    def test_title_and_quick_select_overrides(self) -> None:
        snapshot = self._snapshot({"global": [], "alpha": ["/x"]})
        output = self._run([str(snapshot), "--scope", "global", "--title", "Scopes", "--quick-select", "a"])
        self.assertEqual(output, "Scopes\na /001 alpha [1 tag]\n  /002 global [0 tags]\n")

    def test_config_settings_reach_gutter(self) -> None:
        (self.root / "config.json").write_text(
            json.dumps({"status": False, "quick_select": "qw"}), encoding="utf-8"
        )
        snapshot = self._snapshot({"global": [], "alpha": ["/x"], "beta": []})
        output = self._run([str(snapshot), "--scope", "global"])
        self.assertEqual(
            output,
            "q /001 alpha [1 tag]\nw /002 beta [0 tags]\n  /003 global [0 tags]\n",
        )

    def test_status_highlights_current_sign_unless_disabled(self) -> None:
        snapshot = self._snapshot({"global": [], "alpha": []})
        highlighted = ansiformat(DEFAULT_THEME.sign_current, "2 ")

        stdout = io.StringIO()
        stdout.isatty = lambda: True
        with mock.patch("sys.stdout", stdout):
            cli.main([str(snapshot), "--scope", "global"])
        self.assertIn(highlighted, stdout.getvalue())

        stdout = io.StringIO()
        stdout.isatty = lambda: True
        with mock.patch("sys.stdout", stdout):
            cli.main([str(snapshot), "--scope", "global", "--no-status"])
        self.assertNotIn(highlighted, stdout.getvalue())
        self.assertIn("/002 global", stdout.getvalue())

    def test_reads_snapshot_from_stdin(self) -> None:
        with mock.patch("sys.stdin", io.StringIO('{"global": ["/a"]}')):
            output = self._run(["-", "--scope", "global"])
        self.assertEqual(output, "1 /001 global [1 tag]\n")

    def test_missing_snapshot_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(self.root / "missing.json")])
        self.assertIn("Path not found", str(ctx.exception))

    def test_non_object_snapshot_exits(self) -> None:
        snapshot = self._snapshot(["global"])
        with self.assertRaises(SystemExit):
            self._run([str(snapshot)])

    def test_invalid_json_exits(self) -> None:
        path = self.root / "tags.json"
        path.write_text("{oops", encoding="utf-8")
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(path)])
        self.assertIn("Invalid snapshot JSON", str(ctx.exception))

    def test_empty_scope_exits_with_scope_error(self) -> None:
        snapshot = self._snapshot({"global": []})
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(snapshot), "--scope", ""])
        self.assertIn("did not resolve", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
