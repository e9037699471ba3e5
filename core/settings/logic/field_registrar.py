"""
core/settings/logic/field_registrar.py
======================================

In-Memory-Implementierung von :class:`IFieldRegistrar`.

Sammelt die registrierten Feld-Deskriptoren je (Section, Page) in
Registrierungsreihenfolge; ein Settings-Screen kann sie daraus rendern.
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, List, Sequence, Tuple

from core.contracts.settings import IFieldRegistrar
from core.logging.logic.logger import logger


class InMemoryFieldRegistrar(IFieldRegistrar):
    def __init__(self) -> None:
        self._lock = RLock()
        self._pages: Dict[Tuple[str, str], List[Any]] = {}

    def add_fields(
        self,
        descriptors: Sequence[Any],
        target_section: str,
        target_page: str,
        append_after_existing: bool = True,
    ) -> None:
        with self._lock:
            existing = self._pages.setdefault((target_section, target_page), [])
            if append_after_existing:
                existing.extend(descriptors)
            else:
                existing[:0] = list(descriptors)
        logger.log(
            "FieldRegistrar",
            "FieldsAdded",
            reference_id=f"{target_section}/{target_page}",
            message=f"{len(descriptors)} fields",
        )

    # ---------------- Inspection ------------------------------------------ #
    def fields_for(self, target_section: str, target_page: str) -> List[Any]:
        with self._lock:
            return list(self._pages.get((target_section, target_page), []))

    def pages(self) -> List[Tuple[str, str]]:
        with self._lock:
            return list(self._pages)
