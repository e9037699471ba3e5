"""
Validation rules for daystrip option values.

Stored values may come back from the host as strings (form submissions) or as
native Python values. ``coerce`` turns them into the type the rule stands for
or raises :class:`OptionValidationError`.
"""

from __future__ import annotations

import re
from typing import Any

from daystrip.exceptions.errors import OptionValidationError
from daystrip.models.field_descriptor import ValidationType

_INT_RE = re.compile(r"^[+-]?\d+$")

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _to_int(value: Any) -> int:
    # bool is an int subclass, but "True" is not a day count
    if isinstance(value, bool):
        raise OptionValidationError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        return int(value.strip())
    raise OptionValidationError(f"expected an integer, got {value!r}")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise OptionValidationError(f"expected a boolean, got {value!r}")


def coerce(value: Any, rule: ValidationType) -> Any:
    """Return ``value`` converted according to ``rule``."""
    if rule is ValidationType.POSITIVE_INT:
        number = _to_int(value)
        if number <= 0:
            raise OptionValidationError(f"expected a positive integer, got {value!r}")
        return number
    if rule is ValidationType.INT:
        return _to_int(value)
    if rule is ValidationType.BOOLEAN:
        return _to_bool(value)
    raise OptionValidationError(f"unknown validation rule {rule!r}")


def is_valid(value: Any, rule: ValidationType) -> bool:
    try:
        coerce(value, rule)
    except OptionValidationError:
        return False
    return True
