from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any

from fun_math_quest.db_constants import DRILLS_KEY, LAST_DATE_KEY, STARS_KEY
from fun_math_quest.db_models import DailyChallengeState, SessionResult
from fun_math_quest.game_modes import GameMode
from fun_math_quest.time_utils import parse_iso_date


def _non_negative_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _values_to_challenge_state(values: dict[str, Any]) -> DailyChallengeState:
    return DailyChallengeState(
        drills_completed_today=_non_negative_int(values.get(DRILLS_KEY, 0)),
        total_stars=_non_negative_int(values.get(STARS_KEY, 0)),
        last_active_date=parse_iso_date(values.get(LAST_DATE_KEY)),
    )


def _row_to_session_result(row: sqlite3.Row) -> SessionResult:
    return SessionResult(
        id=str(row["id"]),
        mode=GameMode(row["mode"]),
        total_questions=int(row["total_questions"]),
        correct_answers=int(row["correct_answers"]),
        best_streak=int(row["best_streak"]),
        duration_seconds=max(1, int(row["duration_seconds"])),
        date=datetime.fromisoformat(row["date"]),
    )
