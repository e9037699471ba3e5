"""core/contracts/settings.py
=========================

Settings contracts used for dependency injection by features that keep their
options in the host's flat, application-wide options mapping.

Two collaborators:
- ISettingsStore: key/value persistence for the whole host application.
- IFieldRegistrar: renders labeled form fields on an admin settings page.

Features depend on these interfaces only; the host passes concrete
implementations in (see ``core.settings.logic`` for in-memory ones).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence


class SettingsStoreError(Exception):
    """Raised by a store whose backend is not available."""


class ISettingsStore(ABC):
    """Flat key/value options mapping owned by the host."""

    @abstractmethod
    def read_all(self) -> Mapping[str, Any]:
        """Return the complete options mapping."""

    @abstractmethod
    def write_all(self, options: Mapping[str, Any]) -> bool:
        """Replace the complete options mapping. True on success."""

    @abstractmethod
    def get_option(self, key: str, default: Any = "") -> Any:
        """Return a single stored value or ``default`` if the key is absent."""


class IFieldRegistrar(ABC):
    """Adds field descriptors to a section/page of the admin settings screen."""

    @abstractmethod
    def add_fields(
        self,
        descriptors: Sequence[Any],
        target_section: str,
        target_page: str,
        append_after_existing: bool = True,
    ) -> None:
        """Register ``descriptors`` in order on the given section and page."""
