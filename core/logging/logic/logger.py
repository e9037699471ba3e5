"""
core/logging/logic/logger.py
============================

Thread-sicherer Logger mit SQLite-Backend.

Einträge werden immer im Speicher gehalten (``entries``). Ist
``[Logging] persist`` aktiv, werden sie zusätzlich in die Logging-Datenbank
geschrieben. Ein fehlschlagender DB-Zugriff bricht den Aufrufer nie ab.
"""

from __future__ import annotations

import os
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from core.config.config_service import config_service
from core.logging.models.log_entry import LogEntry


class Logger:
    """Feature/Event-Logger; ``persist=False`` hält alles im Speicher."""

    def __init__(self, db_path: Path | None = None, *, persist: bool | None = None) -> None:
        self._lock = threading.RLock()
        self.db_path: Path = Path(db_path) if db_path is not None else config_service.logging.db_path
        self.persist: bool = config_service.logging.persist if persist is None else persist
        self.entries: list[LogEntry] = []
        self._conn: sqlite3.Connection | None = None

    # ------------------------------------------------------------------ #
    #  Connection management (reuse single connection)                   #
    # ------------------------------------------------------------------ #
    def _get_connection(self) -> sqlite3.Connection:
        with self._lock:
            if self._conn is None:
                os.makedirs(self.db_path.parent, exist_ok=True)
                self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
                self._conn.row_factory = sqlite3.Row
                self._ensure_db(self._conn)
            return self._conn

    def close(self) -> None:
        """Close the database connection and release resources."""
        with self._lock:
            if self._conn is not None:
                try:
                    self._conn.close()
                finally:
                    self._conn = None

    # ------------------------------------------------------------------ #
    #  Öffentliche API: log                                              #
    # ------------------------------------------------------------------ #
    def log(
        self,
        feature: str,
        event: str,
        *,
        level: str = "INFO",
        reference_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        """Speichert einen Logeintrag (Speicher + optional SQLite)."""
        entry = LogEntry(
            id=None,
            timestamp=datetime.now(timezone.utc),
            log_level=level,
            feature=feature,
            event=event,
            reference_id=reference_id,
            message=message,
        )
        with self._lock:
            self.entries.append(entry)
        if self.persist:
            self._insert_log(entry)

    # ------------------------------------------------------------------ #
    #  Fetch / Query / Clear                                             #
    # ------------------------------------------------------------------ #
    def fetch_logs(self, limit: int = 100) -> List[LogEntry]:
        return self.query_logs(limit=limit)

    def query_logs(
        self,
        *,
        feature: Optional[str] = None,
        event: Optional[str] = None,
        reference_id: Optional[str] = None,
        level: Optional[str] = None,
        limit: int = 1_000,
    ) -> List[LogEntry]:
        """Neueste zuerst. Ohne Persistenz wird im Speicher gefiltert."""
        if not self.persist:
            with self._lock:
                rows = [
                    e for e in reversed(self.entries)
                    if (feature is None or e.feature == feature)
                    and (event is None or e.event == event)
                    and (reference_id is None or e.reference_id == reference_id)
                    and (level is None or e.log_level == level)
                ]
            return rows[:limit]

        query = "SELECT * FROM logs WHERE 1=1"
        params: list[object] = []

        if feature is not None:
            query += " AND feature = ?"
            params.append(feature)
        if event is not None:
            query += " AND event = ?"
            params.append(event)
        if reference_id is not None:
            query += " AND reference_id = ?"
            params.append(reference_id)
        if level is not None:
            query += " AND log_level = ?"
            params.append(level)

        query += " ORDER BY timestamp DESC, id DESC LIMIT ?"
        params.append(limit)

        with self._lock:
            rows = self._get_connection().execute(query, params).fetchall()
        return [LogEntry.from_dict(dict(row)) for row in rows]

    def clear_logs(self) -> None:
        with self._lock:
            self.entries.clear()
            if self.persist:
                conn = self._get_connection()
                conn.execute("DELETE FROM logs")
                conn.commit()

    # ------------------------------------------------------------------ #
    #  Interne Helfer                                                    #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _ensure_db(conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                timestamp TEXT NOT NULL,
                feature TEXT NOT NULL,
                event TEXT NOT NULL,
                reference_id TEXT,
                message TEXT,
                log_level TEXT NOT NULL DEFAULT 'INFO'
            )
            """
        )
        conn.commit()

    def _insert_log(self, entry: LogEntry) -> None:
        try:
            with self._lock:
                conn = self._get_connection()
                conn.execute(
                    """
                    INSERT INTO logs
                        (timestamp, feature, event, reference_id, message, log_level)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        entry.timestamp.isoformat(),
                        entry.feature,
                        entry.event,
                        entry.reference_id,
                        entry.message,
                        entry.log_level,
                    ),
                )
                conn.commit()
        except (sqlite3.Error, OSError):
            # Eintrag bleibt in self.entries erhalten
            self.persist = False


# --------------------------------------------------------------------------- #
#  Globale Instanz                                                            #
# --------------------------------------------------------------------------- #
logger: Logger = Logger()
