"""
SettingsAdapter
---------------
Daystrip options on top of the host's flat options mapping.

Every key this feature owns is stored under one prefix (see
:class:`OptionsNamespace`), so callers can simply do
``adapter.get_option("number_of_days", 9)``.

Lifecycle:
- construct the adapter (prefix is fixed from here on),
- the host calls :meth:`register_fields` once during its admin start-up.

Storage and rendering stay with the host; both are injected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from core.config.config_service import config_service
from core.contracts.settings import IFieldRegistrar, ISettingsStore, SettingsStoreError
from core.i18n.translation_manager import T
from core.logging.logic.logger import logger
from core.settings.logic.field_registrar import InMemoryFieldRegistrar
from daystrip.logic.options_namespace import OptionsNamespace
from daystrip.logic.settings_schema import Translator, build_settings_fields
from daystrip.models.daystrip_settings import DaystripSettings
from daystrip.models.field_descriptor import FieldDescriptor

FEATURE = "Daystrip"


class SettingsAdapter:
    """
    Prefixed accessors for the daystrip options plus field registration.

    Args:
        options_prefix (str): Recommended: the plugin text domain with hyphens
            converted to underscores. Forced to end with a single underscore.
        store (ISettingsStore): Host options storage.
        registrar (IFieldRegistrar, optional): Host settings screen. A fresh
            :class:`InMemoryFieldRegistrar` is used if omitted.
        target_section / target_page (str, optional): Where the fields are
            added; defaults come from ``[Daystrip]`` in the configuration.
        translate (callable, optional): ``(label, default) -> text``.
    """

    def __init__(
        self,
        options_prefix: str,
        store: ISettingsStore,
        registrar: Optional[IFieldRegistrar] = None,
        *,
        target_section: Optional[str] = None,
        target_page: Optional[str] = None,
        translate: Translator = T,
    ) -> None:
        self._namespace = OptionsNamespace(options_prefix)
        self._store = store
        self._registrar: IFieldRegistrar = registrar if registrar is not None else InMemoryFieldRegistrar()
        self._target_section = target_section or config_service.daystrip.target_section
        self._target_page = target_page or config_service.daystrip.target_page
        self._translate = translate
        self._fields_registered = False

    # --- Collaborators --------------------------------------------------------

    @property
    def registrar(self) -> IFieldRegistrar:
        return self._registrar

    @registrar.setter
    def registrar(self, registrar: IFieldRegistrar) -> None:
        self._registrar = registrar

    @property
    def store(self) -> ISettingsStore:
        return self._store

    # --- Prefix ---------------------------------------------------------------

    @property
    def options_prefix(self) -> str:
        return self._namespace.prefix

    @property
    def namespace(self) -> OptionsNamespace:
        return self._namespace

    def qualify(self, key: str = "") -> str:
        """Return ``key`` with this feature's prefix (never doubled)."""
        return self._namespace.qualify(key)

    # --- Options --------------------------------------------------------------

    def get_option(self, key: str = "", default: Any = "") -> Any:
        """Stored value for the (prefixed) key, or ``default`` if absent."""
        return self._store.get_option(self.qualify(key), default)

    def delete_option(self, key: str = "") -> bool:
        """
        Removes the (prefixed) key from the host options.

        Returns:
            bool: The store's write result; False if the store did not
            return a mapping (nothing is written then).
        """
        key = self.qualify(key)
        options = self._store.read_all()
        if not isinstance(options, Mapping):
            logger.log(FEATURE, "StoreNotMapping", level="WARNING", reference_id=key)
            return False

        remaining = dict(options)
        removed = key in remaining
        remaining.pop(key, None)
        result = self._store.write_all(remaining)
        if removed:
            logger.log(FEATURE, "OptionDeleted", reference_id=key)
        return result

    def get_all_options(self) -> Dict[str, Any]:
        """All daystrip options with the redundant prefix removed."""
        return {
            self._namespace.strip(key): value
            for key, value in self.get_all_raw_options().items()
        }

    def get_all_raw_options(self) -> Dict[str, Any]:
        """All host options whose key starts with this feature's prefix."""
        try:
            options = self._store.read_all()
        except SettingsStoreError as exc:
            logger.log(FEATURE, "StoreUnavailable", level="WARNING", message=str(exc))
            return {}

        if not isinstance(options, Mapping):
            logger.log(FEATURE, "StoreNotMapping", level="WARNING", message=type(options).__name__)
            return {}

        return {
            key: value
            for key, value in options.items()
            if isinstance(key, str) and self._namespace.owns(key)
        }

    def load_settings(self) -> DaystripSettings:
        return DaystripSettings.from_options(self.get_all_options())

    # --- Fields ---------------------------------------------------------------

    def build_fields(self) -> List[FieldDescriptor]:
        """Settings descriptors in display order, keys prefixed."""
        return [
            field.with_key(self.qualify(field.key))
            for field in build_settings_fields(self._translate)
        ]

    @property
    def fields_registered(self) -> bool:
        return self._fields_registered

    def register_fields(self) -> None:
        """
        Adds the daystrip section to the host's display settings.

        Call once from the host's admin start-up; later calls are ignored.
        """
        if self._fields_registered:
            logger.log(FEATURE, "FieldsAlreadyRegistered", level="DEBUG", reference_id=self.options_prefix)
            return

        fields = self.build_fields()
        self._registrar.add_fields(fields, self._target_section, self._target_page, True)
        self._fields_registered = True
        logger.log(
            FEATURE,
            "FieldsRegistered",
            reference_id=self.options_prefix,
            message=f"{len(fields)} fields -> {self._target_section}/{self._target_page}",
        )
