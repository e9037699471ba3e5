"""
Daystrip feature package initializer.

Provides factory functions the host application calls to wire the day strip
settings without hard-coding internals:

    settings = create_settings(store=host_store, registrar=host_registrar)
    ...
    settings.register_fields()   # during the host's admin start-up
"""

from typing import Optional

from core.config.config_service import config_service
from core.contracts.settings import IFieldRegistrar, ISettingsStore
from core.i18n.translation_manager import T
from core.settings.logic.settings_store import InMemorySettingsStore

from .logic.settings_adapter import SettingsAdapter
from .models.daystrip_settings import DaystripSettings


def get_feature_name() -> str:
    """
    Human readable feature name (used e.g. for navigation labels).

    Returns:
        str: The localized or default feature name.
    """
    return T("daystrip.title", "Daystrip")


def create_settings(
    prefix: Optional[str] = None,
    store: Optional[ISettingsStore] = None,
    registrar: Optional[IFieldRegistrar] = None,
) -> SettingsAdapter:
    """
    Factory for the daystrip settings adapter.

    Args:
        prefix (str, optional): Options prefix; ``[Daystrip] options_prefix`` if omitted.
        store (ISettingsStore, optional): Host options store; in-memory if omitted.
        registrar (IFieldRegistrar, optional): Host settings screen; in-memory if omitted.

    Returns:
        SettingsAdapter: Constructed, fields not yet registered.
    """
    if prefix is None:
        prefix = config_service.daystrip.options_prefix
    if store is None:
        store = InMemorySettingsStore()
    return SettingsAdapter(prefix, store, registrar)


__all__ = ["DaystripSettings", "SettingsAdapter", "create_settings", "get_feature_name"]
