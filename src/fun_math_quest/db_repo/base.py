from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class BaseDatabase:
    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._init_db()
        except sqlite3.Error as exc:
            self._recreate_unreadable_db(exc)

    def _recreate_unreadable_db(self, exc: sqlite3.Error) -> None:
        """Move an unreadable file aside as ``<name>.corrupt`` and start from an empty store."""
        backup = self.path.with_name(f"{self.path.name}.corrupt")
        logger.warning("database %s is unreadable (%s), moving it to %s", self.path, exc, backup)
        try:
            self.path.replace(backup)
            self._init_db()
        except (OSError, sqlite3.Error) as retry_exc:
            logger.warning("could not recreate database %s: %s", self.path, retry_exc)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS schema_migrations (
                    version INTEGER PRIMARY KEY,
                    applied_at TEXT NOT NULL
                )
                """
            )
            current = {row["version"] for row in conn.execute("SELECT version FROM schema_migrations")}

            migrations: dict[int, str] = {
                1: """
                    CREATE TABLE kv_store (
                        key TEXT PRIMARY KEY,
                        value_json TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    );

                    CREATE TABLE session_results (
                        id TEXT PRIMARY KEY,
                        mode TEXT NOT NULL,
                        total_questions INTEGER NOT NULL CHECK(total_questions > 0),
                        correct_answers INTEGER NOT NULL CHECK(correct_answers >= 0),
                        best_streak INTEGER NOT NULL CHECK(best_streak >= 0),
                        duration_seconds INTEGER NOT NULL CHECK(duration_seconds >= 1),
                        date TEXT NOT NULL
                    );

                    CREATE INDEX idx_session_results_date ON session_results(date);
                """,
            }

            now = datetime.now().isoformat(timespec="seconds")
            for version in sorted(migrations):
                if version in current:
                    continue
                conn.executescript(migrations[version])
                conn.execute(
                    "INSERT INTO schema_migrations(version, applied_at) VALUES (?, ?)",
                    (version, now),
                )

    def _kv_get_many(self, keys: tuple[str, ...]) -> dict[str, Any]:
        """Decode the stored JSON values for *keys*; undecodable values are skipped."""
        placeholders = ", ".join("?" for _ in keys)
        with self._connect() as conn:
            rows = conn.execute(
                f"SELECT key, value_json FROM kv_store WHERE key IN ({placeholders})",
                keys,
            ).fetchall()
        values: dict[str, Any] = {}
        for row in rows:
            try:
                values[str(row["key"])] = json.loads(str(row["value_json"]))
            except json.JSONDecodeError:
                logger.warning("skipping undecodable value for %s", row["key"])
        return values

    def _kv_set_many(self, values: dict[str, Any]) -> None:
        now = datetime.now().isoformat()
        with self._connect() as conn:
            for key, value in values.items():
                conn.execute(
                    """
                    INSERT INTO kv_store(key, value_json, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value_json=excluded.value_json,
                        updated_at=excluded.updated_at
                    """,
                    (key, json.dumps(value), now),
                )
