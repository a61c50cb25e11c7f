import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from klondike_ui import settings_store


class SettingsStoreTestCase(unittest.TestCase):
    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            with patch.object(settings_store, "SETTINGS_PATH", Path(td) / "settings.ini"):
                data = settings_store.load_settings()
        self.assertEqual(settings_store.DEFAULT_SETTINGS, data)

    def test_load_sanitizes_invalid_values(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            ini_path.write_text(
                "[ui]\n"
                "seed = banana\n"
                "stock_preview = 9\n"
                "suit_style = emoji\n",
                encoding="utf-8",
            )
            with patch.object(settings_store, "SETTINGS_PATH", ini_path):
                data = settings_store.load_settings()
        self.assertEqual("", data["seed"])
        self.assertEqual("3", data["stock_preview"])
        self.assertEqual("symbols", data["suit_style"])

    def test_file_without_ui_section_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            ini_path.write_text("[other]\nseed = 4\n", encoding="utf-8")
            with patch.object(settings_store, "SETTINGS_PATH", ini_path):
                data = settings_store.load_settings()
        self.assertEqual(settings_store.DEFAULT_SETTINGS, data)

    def test_save_then_load(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "nested" / "settings.ini"
            with patch.object(settings_store, "SETTINGS_PATH", ini_path):
                settings_store.save_settings({"seed": " 42 ", "stock_preview": 1, "suit_style": "letters", "theme": "x"})
                text = ini_path.read_text(encoding="utf-8")
                data = settings_store.load_settings()
        self.assertIn("seed = 42", text)
        self.assertNotIn("theme", text)
        self.assertEqual({"seed": "42", "stock_preview": "1", "suit_style": "letters"}, data)

    def test_seed_from(self):
        self.assertIsNone(settings_store.seed_from({"seed": ""}))
        self.assertEqual(17, settings_store.seed_from({"seed": "17"}))


if __name__ == "__main__":
    unittest.main()
