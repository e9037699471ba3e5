"""
core/tests/test_translation_manager.py

TSV label loading and fallback texts.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import config_service
from core.i18n.translation_manager import TranslationManager


class TestTranslationManager(unittest.TestCase):
    def setUp(self) -> None:
        self.tm = TranslationManager()

    def test_packaged_labels(self) -> None:
        self.tm.load_file(config_service.i18n.labels_tsv)
        self.assertEqual(self.tm.available_languages(), ["en", "de"])
        self.assertEqual(self.tm.t("daystrip.settings.full_width.label", "en"), "Full width strip")
        self.assertEqual(self.tm.t("daystrip.title", "de"), "Tagesleiste")

    def test_missing_key_falls_back(self) -> None:
        self.assertEqual(self.tm.t("nope", "en", "Default text"), "Default text")
        self.assertEqual(self.tm.t("nope", "en"), "nope")

    def test_coverage(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "labels.tsv"
            path.write_text("label\ten\tde\na\tA\tA-de\nb\tB\t\n", encoding="utf-8")
            self.tm.load_file(path)
        self.assertEqual(self.tm.coverage["en"], 1.0)
        self.assertEqual(self.tm.coverage["de"], 0.5)
        self.assertEqual(self.tm.t("b", "de", "B"), "B")


if __name__ == "__main__":
    unittest.main()
