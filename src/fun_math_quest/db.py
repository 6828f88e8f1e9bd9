from __future__ import annotations

from fun_math_quest.db_models import DailyChallengeState, SessionResult
from fun_math_quest.db_repo import BaseDatabase, ChallengeMixin, HistoryMixin, SystemMixin

__all__ = ["Database", "DailyChallengeState", "SessionResult"]


class Database(ChallengeMixin, HistoryMixin, SystemMixin, BaseDatabase):
    pass
