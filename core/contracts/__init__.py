"""core.contracts

Central, stable interfaces (ABCs) used as the ONLY cross-feature public API.

Features depend on contracts, not on concrete implementations of the host.
This package intentionally contains only interfaces and shared error types.
"""

from core.contracts.settings import IFieldRegistrar, ISettingsStore, SettingsStoreError

__all__ = ["IFieldRegistrar", "ISettingsStore", "SettingsStoreError"]
