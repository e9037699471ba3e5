"""
daystrip/tests/test_field_descriptor.py

Descriptor construction rules and the host mapping rendering.
"""

from __future__ import annotations

import unittest

from daystrip.exceptions.errors import FieldDescriptorError
from daystrip.logic.settings_schema import build_settings_fields
from daystrip.models.field_descriptor import (
    CheckboxField,
    FieldSize,
    HtmlField,
    TextField,
    ValidationType,
)


def _default_text(label: str, default: str) -> str:
    return default


class TestDescriptorRules(unittest.TestCase):
    def test_empty_key_rejected(self) -> None:
        with self.assertRaises(FieldDescriptorError):
            HtmlField(key="", html="<h3>x</h3>")

    def test_checkbox_only_accepts_boolean_rule(self) -> None:
        with self.assertRaises(FieldDescriptorError):
            CheckboxField(key="flag", validation_type=ValidationType.INT)

    def test_text_rejects_boolean_rule(self) -> None:
        with self.assertRaises(FieldDescriptorError):
            TextField(key="days", validation_type=ValidationType.BOOLEAN)

    def test_text_rejects_raw_strings(self) -> None:
        with self.assertRaises(FieldDescriptorError):
            TextField(key="days", validation_type="positive_int")  # type: ignore[arg-type]
        with self.assertRaises(FieldDescriptorError):
            TextField(key="days", size="small")  # type: ignore[arg-type]

    def test_descriptor_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            HtmlField(key="")

    def test_with_key_keeps_payload(self) -> None:
        field = TextField(key="days", label="Days", default=9, size=FieldSize.SMALL)
        renamed = field.with_key("p_days")
        self.assertEqual(renamed.key, "p_days")
        self.assertEqual(renamed.label, "Days")
        self.assertEqual(field.key, "days")


class TestHostMapping(unittest.TestCase):
    def setUp(self) -> None:
        self.fields = build_settings_fields(_default_text)

    def test_intro_mapping(self) -> None:
        self.assertEqual(
            self.fields[0].as_dict(),
            {"type": "html", "html": "<h3>Daystrip Extension Settings</h3>"},
        )

    def test_number_of_days_mapping(self) -> None:
        data = self.fields[1].as_dict()
        self.assertEqual(data["type"], "text")
        self.assertEqual(data["label"], "Number of days to show on the day strip")
        self.assertEqual(data["validation_type"], "positive_int")
        self.assertEqual(data["size"], "small")
        self.assertEqual(data["default"], 9)
        self.assertTrue(data["tooltip"].endswith("<br/><em>Default value: 9</em>"))

    def test_length_of_day_name_mapping(self) -> None:
        data = self.fields[2].as_dict()
        self.assertEqual(data["validation_type"], "int")
        self.assertEqual(data["default"], 2)
        self.assertTrue(data["tooltip"].endswith("<br/><em>Default value: 2</em>"))

    def test_full_width_has_no_default(self) -> None:
        data = self.fields[3].as_dict()
        self.assertEqual(data["type"], "checkbox_bool")
        self.assertEqual(data["validation_type"], "boolean")
        self.assertNotIn("default", data)
        self.assertNotIn("size", data)

    def test_translated_text_is_escaped(self) -> None:
        fields = build_settings_fields(lambda label, default: "<b>" + default)
        self.assertTrue(fields[0].html.startswith("<h3>&lt;b&gt;"))
        self.assertTrue(fields[1].label.startswith("&lt;b&gt;"))


if __name__ == "__main__":
    unittest.main()
