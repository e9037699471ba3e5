"""
Daystrip settings schema.

Builds the (un-prefixed) field descriptors shown in the host's display
settings: a header followed by the three day strip options.
"""

from __future__ import annotations

import html
from typing import Callable, List

from core.i18n.translation_manager import T
from daystrip.models.field_descriptor import (
    CheckboxField,
    FieldDescriptor,
    FieldSize,
    HtmlField,
    TextField,
    ValidationType,
)

Translator = Callable[[str, str], str]

DEFAULT_NUMBER_OF_DAYS = 9
DEFAULT_LENGTH_OF_DAY_NAME = 2
DEFAULT_FULL_WIDTH = False

INTRO_KEY = "intro"
NUMBER_OF_DAYS_KEY = "number_of_days"
LENGTH_OF_DAY_NAME_KEY = "length_of_day_name"
FULL_WIDTH_KEY = "full_width"


def _esc(translate: Translator, label: str, default: str) -> str:
    return html.escape(translate(label, default))


def _default_hint(translate: Translator, value: object) -> str:
    return "<br/><em>" + _esc(translate, "daystrip.settings.default_value", "Default value:") + f" {value}</em>"


def intro_html(translate: Translator = T) -> str:
    return "<h3>" + _esc(translate, "daystrip.settings.header", "Daystrip Extension Settings") + "</h3>"


def build_settings_fields(translate: Translator = T) -> List[FieldDescriptor]:
    """Return the descriptors in display order."""
    return [
        HtmlField(key=INTRO_KEY, html=intro_html(translate)),
        TextField(
            key=NUMBER_OF_DAYS_KEY,
            label=_esc(translate, "daystrip.settings.number_of_days.label",
                       "Number of days to show on the day strip"),
            tooltip=_esc(translate, "daystrip.settings.number_of_days.tooltip",
                         "The number of days to be shown on the daystrip. "
                         "Best is if it is an odd number, and bigger than 2.")
            + _default_hint(translate, DEFAULT_NUMBER_OF_DAYS),
            validation_type=ValidationType.POSITIVE_INT,
            size=FieldSize.SMALL,
            default=DEFAULT_NUMBER_OF_DAYS,
        ),
        TextField(
            key=LENGTH_OF_DAY_NAME_KEY,
            label=_esc(translate, "daystrip.settings.length_of_day_name.label", "Length of the day name"),
            tooltip=_esc(translate, "daystrip.settings.length_of_day_name.tooltip",
                         "Defines how long the day name should be, e.g. if set to 2 then day names "
                         "will be like Mo, Tu, etc. With a value of zero (0) day names will be hidden.")
            + _default_hint(translate, DEFAULT_LENGTH_OF_DAY_NAME),
            validation_type=ValidationType.INT,
            size=FieldSize.SMALL,
            default=DEFAULT_LENGTH_OF_DAY_NAME,
        ),
        CheckboxField(
            key=FULL_WIDTH_KEY,
            label=_esc(translate, "daystrip.settings.full_width.label", "Full width strip"),
            tooltip=_esc(translate, "daystrip.settings.full_width.tooltip",
                         "By default and if it fits, the strip appears next to the datepicker on the "
                         "right. If set to full width, then the daystrip will appear below the datepicker."),
            validation_type=ValidationType.BOOLEAN,
        ),
    ]
