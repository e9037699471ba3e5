"""Validation rules used by the daystrip options."""
from __future__ import annotations

import pytest

from daystrip.exceptions.errors import OptionValidationError
from daystrip.logic.validation import coerce, is_valid
from daystrip.models.field_descriptor import ValidationType


@pytest.mark.parametrize(
    "value, expected",
    [(9, 9), ("9", 9), (" 11 ", 11), ("+3", 3)],
)
def test_positive_int_accepts(value, expected) -> None:
    assert coerce(value, ValidationType.POSITIVE_INT) == expected


@pytest.mark.parametrize("value", [0, -1, "0", "abc", "1.5", True, None, ""])
def test_positive_int_rejects(value) -> None:
    with pytest.raises(OptionValidationError):
        coerce(value, ValidationType.POSITIVE_INT)


def test_int_allows_zero_and_negative() -> None:
    assert coerce("0", ValidationType.INT) == 0
    assert coerce(-2, ValidationType.INT) == -2
    assert not is_valid("two", ValidationType.INT)


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), (False, False), ("1", True), ("on", True), ("Yes", True),
     ("0", False), ("", False), ("off", False), (1, True), (0, False)],
)
def test_boolean(value, expected) -> None:
    assert coerce(value, ValidationType.BOOLEAN) is expected


def test_boolean_rejects_other_values() -> None:
    assert not is_valid("maybe", ValidationType.BOOLEAN)
    assert not is_valid(2, ValidationType.BOOLEAN)
