"""
daystrip/tests/test_options_namespace.py

Prefix normalization and key qualification.
"""

from __future__ import annotations

import unittest

from daystrip.logic.options_namespace import OptionsNamespace, normalize_prefix


class TestPrefixNormalization(unittest.TestCase):
    def test_plain_identifier_gets_one_separator(self) -> None:
        self.assertEqual(normalize_prefix("tribe_ext_daystrip"), "tribe_ext_daystrip_")

    def test_trailing_separators_collapse(self) -> None:
        for raw in ("daystrip_", "daystrip__", "daystrip___", "daystrip_____"):
            with self.subTest(raw=raw):
                self.assertEqual(normalize_prefix(raw), "daystrip_")

    def test_inner_doubled_separators_collapse(self) -> None:
        self.assertEqual(normalize_prefix("tribe__ext___daystrip"), "tribe_ext_daystrip_")

    def test_empty_prefix(self) -> None:
        self.assertEqual(normalize_prefix(""), "_")

    def test_never_contains_double_separator(self) -> None:
        for raw in ("", "_", "__", "a", "a_b", "a__b__", "___x___"):
            with self.subTest(raw=raw):
                prefix = normalize_prefix(raw)
                self.assertTrue(prefix.endswith("_"))
                self.assertFalse(prefix.endswith("__"))
                self.assertNotIn("__", prefix)

    def test_namespace_is_immutable(self) -> None:
        ns = OptionsNamespace("daystrip")
        with self.assertRaises(AttributeError):
            ns._prefix = "other_"  # type: ignore[misc]
        self.assertEqual(ns.prefix, "daystrip_")


class TestQualify(unittest.TestCase):
    def setUp(self) -> None:
        self.ns = OptionsNamespace("tribe_ext_daystrip")

    def test_qualify_adds_prefix(self) -> None:
        self.assertEqual(self.ns.qualify("number_of_days"), "tribe_ext_daystrip_number_of_days")

    def test_qualify_is_idempotent(self) -> None:
        for key in ("", "number_of_days", "tribe_ext_daystrip_full_width", "other_prefix_key"):
            with self.subTest(key=key):
                once = self.ns.qualify(key)
                self.assertEqual(self.ns.qualify(once), once)

    def test_foreign_prefix_is_not_rejected(self) -> None:
        self.assertEqual(self.ns.qualify("other_key"), "tribe_ext_daystrip_other_key")

    def test_strip_is_anchored(self) -> None:
        key = "tribe_ext_daystrip_copy_of_tribe_ext_daystrip_"
        self.assertEqual(self.ns.strip(key), "copy_of_tribe_ext_daystrip_")
        self.assertEqual(self.ns.strip("unrelated"), "unrelated")

    def test_equality(self) -> None:
        self.assertEqual(self.ns, OptionsNamespace("tribe_ext_daystrip_"))
        self.assertEqual(str(self.ns), "tribe_ext_daystrip_")


if __name__ == "__main__":
    unittest.main()
