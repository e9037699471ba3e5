"""
core/tests/test_config_service.py

Layered configuration: defaults, environment overlay, typed sections.
"""

from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from core.config.config_service import ConfigService


class TestConfigService(unittest.TestCase):
    def test_daystrip_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            cfg = ConfigService()
        self.assertEqual(cfg.daystrip.target_section, "display")
        self.assertEqual(cfg.daystrip.target_page, "tribeEventsDateFormatSettingsTitle")
        self.assertIsInstance(cfg.logging.db_path, Path)
        self.assertIsInstance(cfg.logging.persist, bool)

    def test_env_overlay(self) -> None:
        env = {
            "DAYSTRIP_DAYSTRIP__OPTIONS_PREFIX": "my_ext",
            "DAYSTRIP_LOGGING__PERSIST": "off",
            "DAYSTRIP_I18N__LANGUAGE": "de",
        }
        with mock.patch.dict(os.environ, env):
            cfg = ConfigService()
        self.assertEqual(cfg.daystrip.options_prefix, "my_ext")
        self.assertFalse(cfg.logging.persist)
        self.assertEqual(cfg.i18n.language, "de")
        self.assertEqual(cfg.meta_source("Daystrip", "options_prefix")["layer"], "env")

    def test_get_with_cast(self) -> None:
        with mock.patch.dict(os.environ, {"DAYSTRIP_LOGGING__PERSIST": "yes"}):
            cfg = ConfigService()
        self.assertIs(cfg.get("Logging", "persist", cast=bool), True)
        self.assertIsNone(cfg.get("Logging", "missing"))
        self.assertEqual(cfg.get("Daystrip", "target_section", cast=str.upper), "DISPLAY")


if __name__ == "__main__":
    unittest.main()
