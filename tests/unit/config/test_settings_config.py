"""Tests for settings persistence and input sanitization.

Ensures malformed config data is safely normalized on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tagview import config
from tagview.scope import DEFAULT_QUICK_SELECT, Settings


class SettingsConfigTests(unittest.TestCase):
    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing" / "config.json"
            with mock.patch("tagview.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_settings(), Settings())

    def test_settings_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("tagview.config.CONFIG_PATH", config_path):
                config.save_settings(Settings(status=False, quick_select="asdf"))
                self.assertEqual(config.load_settings(), Settings(status=False, quick_select="asdf"))

    def test_save_settings_keeps_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("tagview.config.CONFIG_PATH", config_path):
                config.save_config({"theme": "ocean"})
                config.save_settings(Settings())
                self.assertEqual(config.load_config().get("theme"), "ocean")

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("tagview.config.CONFIG_PATH", config_path):
                config.save_config({"status": "yes", "quick_select": "   "})
                self.assertTrue(config.load_status())
                self.assertEqual(config.load_quick_select(), DEFAULT_QUICK_SELECT)

                config.save_config({"quick_select": 12})
                self.assertEqual(config.load_quick_select(), DEFAULT_QUICK_SELECT)

    def test_malformed_json_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("tagview.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_object_json_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]\n", encoding="utf-8")
            with mock.patch("tagview.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
