from __future__ import annotations

import json
import logging
import os
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Protocol

from pydantic import ValidationError

from app.core.config import settings
from app.schemas.analysis import AnalysisRecord

logger = logging.getLogger(__name__)


class HistoryStoreError(RuntimeError):
    pass


class AnalysisRepository(Protocol):
    def save_or_update(self, record: AnalysisRecord) -> None: ...

    def load_all(self) -> list[AnalysisRecord]: ...

    def get_by_id(self, analysis_id: str) -> AnalysisRecord | None: ...


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class AnalysisHistoryStore:
    """Local analysis history: upsert by id, newest insert first.

    Updating an existing record keeps its position in the history; each
    write happens in a single transaction.
    """

    def __init__(self, db_path: str | None = None) -> None:
        self._db_path = db_path or settings.history_db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _get_connection(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn

        directory = os.path.dirname(self._db_path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            conn = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                timeout=5,
                isolation_level=None,
            )
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
            conn.execute("PRAGMA busy_timeout=5000;")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS analysis_history (
                    analysis_id TEXT PRIMARY KEY,
                    position INTEGER NOT NULL,
                    payload_json TEXT NOT NULL,
                    saved_at TEXT NOT NULL
                );
                """
            )
            conn.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_analysis_history_position
                ON analysis_history (position);
                """
            )
        except (OSError, sqlite3.Error) as exc:
            raise HistoryStoreError(f"Unable to open analysis history at '{self._db_path}': {exc}") from exc

        self._conn = conn
        return conn

    def save_or_update(self, record: AnalysisRecord) -> None:
        try:
            payload_json = json.dumps(record.to_payload(), ensure_ascii=False)
            payload_json.encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise HistoryStoreError(f"Unable to serialize analysis '{record.id}': {exc}") from exc

        with self._lock:
            conn = self._get_connection()
            cursor = conn.cursor()
            try:
                cursor.execute("BEGIN IMMEDIATE")
                cursor.execute(
                    """
                    INSERT INTO analysis_history (analysis_id, position, payload_json, saved_at)
                    VALUES (?, (SELECT COALESCE(MAX(position), 0) + 1 FROM analysis_history), ?, ?)
                    ON CONFLICT(analysis_id) DO UPDATE SET
                        payload_json = excluded.payload_json,
                        saved_at = excluded.saved_at
                    """,
                    (record.id, payload_json, _utc_now()),
                )
                conn.commit()
            except sqlite3.Error as exc:
                conn.rollback()
                raise HistoryStoreError(f"Unable to save analysis '{record.id}': {exc}") from exc
            except Exception:
                conn.rollback()
                raise

        logger.info(json.dumps({"event": "analysis_saved", "analysis_id": record.id}))

    def load_all(self) -> list[AnalysisRecord]:
        with self._lock:
            conn = self._get_connection()
            try:
                rows = conn.execute(
                    "SELECT analysis_id, payload_json FROM analysis_history ORDER BY position DESC"
                ).fetchall()
            except sqlite3.Error as exc:
                raise HistoryStoreError(f"Unable to read analysis history: {exc}") from exc
        return [self._decode(row[0], row[1]) for row in rows]

    def get_by_id(self, analysis_id: str) -> AnalysisRecord | None:
        with self._lock:
            conn = self._get_connection()
            try:
                row = conn.execute(
                    "SELECT analysis_id, payload_json FROM analysis_history WHERE analysis_id = ?",
                    (analysis_id,),
                ).fetchone()
            except sqlite3.Error as exc:
                raise HistoryStoreError(f"Unable to read analysis '{analysis_id}': {exc}") from exc

        if not row:
            return None
        return self._decode(row[0], row[1])

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    @staticmethod
    def _decode(analysis_id: str, payload_json: str) -> AnalysisRecord:
        try:
            return AnalysisRecord.from_payload(json.loads(payload_json))
        except (ValueError, ValidationError) as exc:
            raise HistoryStoreError(f"Stored analysis '{analysis_id}' is corrupt: {exc}") from exc


_default_store: AnalysisHistoryStore | None = None
_default_store_lock = threading.Lock()


def get_history_store() -> AnalysisHistoryStore:
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = AnalysisHistoryStore()
        return _default_store
