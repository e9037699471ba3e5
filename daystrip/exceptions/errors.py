"""Daystrip feature exceptions."""
from __future__ import annotations


class DaystripError(Exception):
    """Base exception for the daystrip feature."""


class FieldDescriptorError(DaystripError, ValueError):
    """Raised when a settings field descriptor is malformed."""


class OptionValidationError(DaystripError, ValueError):
    """Raised when an option value does not satisfy its validation rule."""
