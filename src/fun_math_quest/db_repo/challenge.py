from __future__ import annotations

import logging
import sqlite3
from typing import Any, Protocol

from fun_math_quest.db_constants import CHALLENGE_KEYS, DRILLS_KEY, LAST_DATE_KEY, STARS_KEY
from fun_math_quest.db_converters import _values_to_challenge_state
from fun_math_quest.db_models import DailyChallengeState

logger = logging.getLogger(__name__)


class DbProtocol(Protocol):
    def _kv_get_many(self, keys: tuple[str, ...]) -> dict[str, Any]: ...
    def _kv_set_many(self, values: dict[str, Any]) -> None: ...


class ChallengeMixin:
    def load_challenge_state(self: DbProtocol) -> DailyChallengeState:
        try:
            values = self._kv_get_many(CHALLENGE_KEYS)
        except sqlite3.Error as exc:
            logger.warning("could not load daily challenge state, starting fresh: %s", exc)
            return DailyChallengeState()
        return _values_to_challenge_state(values)

    def save_challenge_state(self: DbProtocol, state: DailyChallengeState) -> bool:
        values: dict[str, Any] = {
            DRILLS_KEY: state.drills_completed_today,
            STARS_KEY: state.total_stars,
        }
        if state.last_active_date is not None:
            values[LAST_DATE_KEY] = state.last_active_date.isoformat()
        try:
            self._kv_set_many(values)
        except sqlite3.Error as exc:
            logger.warning("could not save daily challenge state: %s", exc)
            return False
        return True
