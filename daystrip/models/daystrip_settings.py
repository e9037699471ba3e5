"""
Data model for Daystrip settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from daystrip.exceptions.errors import OptionValidationError
from daystrip.logic.settings_schema import (
    DEFAULT_FULL_WIDTH,
    DEFAULT_LENGTH_OF_DAY_NAME,
    DEFAULT_NUMBER_OF_DAYS,
    FULL_WIDTH_KEY,
    LENGTH_OF_DAY_NAME_KEY,
    NUMBER_OF_DAYS_KEY,
)
from daystrip.logic.validation import coerce
from daystrip.models.field_descriptor import ValidationType


@dataclass(frozen=True)
class DaystripSettings:
    """
    Encapsulates the user-configurable options of the day strip.

    Attributes:
        number_of_days (int): Days shown on the strip (positive; odd and > 2 looks best).
        length_of_day_name (int): Characters of the day name to show; 0 hides names.
        full_width (bool): Show the strip below the datepicker instead of next to it.
    """
    number_of_days: int = DEFAULT_NUMBER_OF_DAYS
    length_of_day_name: int = DEFAULT_LENGTH_OF_DAY_NAME
    full_width: bool = DEFAULT_FULL_WIDTH

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "DaystripSettings":
        """
        Builds settings from an un-prefixed options mapping.

        Missing values and values failing their validation rule fall back to
        the defaults.
        """
        def pick(key: str, rule: ValidationType, default: Any) -> Any:
            if key not in options:
                return default
            try:
                return coerce(options[key], rule)
            except OptionValidationError:
                return default

        return cls(
            number_of_days=pick(NUMBER_OF_DAYS_KEY, ValidationType.POSITIVE_INT, DEFAULT_NUMBER_OF_DAYS),
            length_of_day_name=pick(LENGTH_OF_DAY_NAME_KEY, ValidationType.INT, DEFAULT_LENGTH_OF_DAY_NAME),
            full_width=pick(FULL_WIDTH_KEY, ValidationType.BOOLEAN, DEFAULT_FULL_WIDTH),
        )

    def abbreviate_day_name(self, day_name: str) -> str:
        """
        Returns the day name cut to ``length_of_day_name`` characters.

        Returns:
            str: e.g. "Mo" for "Monday" with length 2, "" if names are hidden.
        """
        if self.length_of_day_name <= 0:
            return ""
        return day_name[: self.length_of_day_name]
