"""Settings field descriptors.

A descriptor is one of three kinds, each with its own payload:

- ``HtmlField``      static HTML block (e.g. a section header)
- ``TextField``      text input, validated by the host on save
- ``CheckboxField``  boolean checkbox

Descriptors are immutable; ``with_key`` returns a copy under a new key (used
to apply the options prefix). ``as_dict`` renders the plain mapping the host
settings screen understands.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from daystrip.exceptions.errors import FieldDescriptorError


class FieldKind(Enum):
    """Field types as named by the host settings screen."""

    HTML = "html"
    TEXT = "text"
    CHECKBOX_BOOL = "checkbox_bool"


class ValidationType(Enum):
    """Host validation rules applied to submitted values."""

    POSITIVE_INT = "positive_int"
    INT = "int"
    BOOLEAN = "boolean"


class FieldSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class FieldDescriptor:
    """Common base: every descriptor has a non-empty key."""

    key: str

    kind: ClassVar[FieldKind]

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise FieldDescriptorError(f"{type(self).__name__}: key must be a non-empty string")

    def with_key(self, key: str) -> "FieldDescriptor":
        return replace(self, key=key)

    def as_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value}


@dataclass(frozen=True)
class HtmlField(FieldDescriptor):
    html: str = ""

    kind: ClassVar[FieldKind] = FieldKind.HTML

    def as_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "html": self.html}


@dataclass(frozen=True)
class _InputField(FieldDescriptor):
    """Labeled input with a validation rule; base of text and checkbox."""

    label: str = ""
    tooltip: str = ""
    validation_type: ValidationType = ValidationType.INT
    default: Optional[Any] = None

    allowed_validation: ClassVar[FrozenSet[ValidationType]] = frozenset(ValidationType)

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.validation_type, ValidationType):
            raise FieldDescriptorError(
                f"{self.key}: validation_type must be a ValidationType, got {self.validation_type!r}"
            )
        if self.validation_type not in self.allowed_validation:
            raise FieldDescriptorError(
                f"{self.key}: validation '{self.validation_type.value}' not allowed for {self.kind.value}"
            )

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.kind.value,
            "label": self.label,
            "tooltip": self.tooltip,
            "validation_type": self.validation_type.value,
        }
        if self.default is not None:
            data["default"] = self.default
        return data


@dataclass(frozen=True)
class TextField(_InputField):
    size: FieldSize = FieldSize.MEDIUM

    kind: ClassVar[FieldKind] = FieldKind.TEXT
    allowed_validation: ClassVar[FrozenSet[ValidationType]] = frozenset(
        {ValidationType.POSITIVE_INT, ValidationType.INT}
    )

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.size, FieldSize):
            raise FieldDescriptorError(f"{self.key}: size must be a FieldSize, got {self.size!r}")

    def as_dict(self) -> Dict[str, Any]:
        data = super().as_dict()
        data["size"] = self.size.value
        return data


@dataclass(frozen=True)
class CheckboxField(_InputField):
    validation_type: ValidationType = ValidationType.BOOLEAN

    kind: ClassVar[FieldKind] = FieldKind.CHECKBOX_BOOL
    allowed_validation: ClassVar[FrozenSet[ValidationType]] = frozenset({ValidationType.BOOLEAN})
