from __future__ import annotations

import logging
import sqlite3
from typing import Protocol

from fun_math_quest.db_converters import _row_to_session_result
from fun_math_quest.db_models import SessionResult

logger = logging.getLogger(__name__)


class DbProtocol(Protocol):
    def _connect(self) -> sqlite3.Connection: ...


class HistoryMixin:
    def list_session_results(self: DbProtocol, limit: int | None = None) -> list[SessionResult]:
        """Return stored results newest first, skipping rows that no longer decode."""
        query = "SELECT * FROM session_results ORDER BY rowid DESC"
        params: tuple[int, ...] = ()
        if limit is not None:
            query += " LIMIT ?"
            params = (max(0, limit),)
        try:
            with self._connect() as conn:
                rows = conn.execute(query, params).fetchall()
        except sqlite3.Error as exc:
            logger.warning("could not load session history, starting empty: %s", exc)
            return []

        results: list[SessionResult] = []
        for row in rows:
            try:
                results.append(_row_to_session_result(row))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("skipping unreadable session result %s: %s", row["id"], exc)
        return results

    def add_session_result(self: DbProtocol, result: SessionResult) -> bool:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO session_results(
                        id, mode, total_questions, correct_answers, best_streak, duration_seconds, date
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        result.id,
                        result.mode.value,
                        result.total_questions,
                        result.correct_answers,
                        result.best_streak,
                        result.duration_seconds,
                        result.date.isoformat(),
                    ),
                )
        except sqlite3.Error as exc:
            logger.warning("could not save session result %s: %s", result.id, exc)
            return False
        return True

    def clear_session_results(self: DbProtocol) -> bool:
        try:
            with self._connect() as conn:
                conn.execute("DELETE FROM session_results")
        except sqlite3.Error as exc:
            logger.warning("could not clear session history: %s", exc)
            return False
        return True
