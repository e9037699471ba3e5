"""
core/settings/logic/settings_store.py
=====================================

In-Memory-Implementierung von :class:`ISettingsStore`.

Hält die flache Options-Map der Anwendung in einem dict. Gedacht für
Einbettung ohne Host-Persistenz und für Tests (``available=False``
simuliert ein nicht erreichbares Backend).
"""

from __future__ import annotations

import copy
from threading import RLock
from typing import Any, Dict, Mapping, Optional

from core.contracts.settings import ISettingsStore, SettingsStoreError
from core.logging.logic.logger import logger


class InMemorySettingsStore(ISettingsStore):
    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._lock = RLock()
        self._options: Dict[str, Any] = dict(initial or {})
        self.available: bool = True

    # ------------------------------------------------------------------ #
    #  API                                                               #
    # ------------------------------------------------------------------ #
    def read_all(self) -> Dict[str, Any]:
        self._check_available()
        with self._lock:
            # Kopie: Aufrufer dürfen mutieren, ohne den Store zu verändern
            return copy.deepcopy(self._options)

    def write_all(self, options: Mapping[str, Any]) -> bool:
        self._check_available()
        with self._lock:
            self._options = dict(options)
        logger.log("SettingsStore", "WriteAll", message=f"{len(options)} entries")
        return True

    def get_option(self, key: str, default: Any = "") -> Any:
        self._check_available()
        with self._lock:
            return self._options.get(key, default)

    def set_option(self, key: str, value: Any) -> None:
        self._check_available()
        with self._lock:
            self._options[key] = value

    # ------------------------------------------------------------------ #
    def _check_available(self) -> None:
        if not self.available:
            raise SettingsStoreError("settings store is not available")
