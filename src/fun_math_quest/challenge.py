"""Daily Challenge bookkeeping: drills per day, milestones and stars."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from fun_math_quest.db_models import DailyChallengeState

logger = logging.getLogger(__name__)

DAILY_GOAL = 100
DRILLS_PER_MILESTONE = 10
STARS_PER_MILESTONE = 5
MAX_DAILY_STARS = (DAILY_GOAL // DRILLS_PER_MILESTONE) * STARS_PER_MILESTONE


def milestones_for(drills: int) -> int:
    return max(0, drills) // DRILLS_PER_MILESTONE


def stars_for_drills(before: int, count: int) -> int:
    return (milestones_for(before + count) - milestones_for(before)) * STARS_PER_MILESTONE


class DailyChallengeTracker:
    """In-memory daily challenge state.

    The tracker never writes to storage itself; callers read ``state`` after a
    mutation and persist it.
    """

    def __init__(
        self,
        state: DailyChallengeState | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        state = state or DailyChallengeState()
        self._today = today or date.today
        self.drills_completed_today = max(0, state.drills_completed_today)
        self.total_stars = max(0, state.total_stars)
        self.last_active_date = state.last_active_date

    @property
    def state(self) -> DailyChallengeState:
        return DailyChallengeState(
            drills_completed_today=self.drills_completed_today,
            total_stars=self.total_stars,
            last_active_date=self.last_active_date,
        )

    @property
    def is_daily_complete(self) -> bool:
        return self.drills_completed_today >= DAILY_GOAL

    @property
    def progress(self) -> float:
        return min(self.drills_completed_today / DAILY_GOAL, 1.0)

    @property
    def milestones_reached(self) -> int:
        return milestones_for(self.drills_completed_today)

    @property
    def drills_to_next_milestone(self) -> int:
        return DRILLS_PER_MILESTONE - (self.drills_completed_today % DRILLS_PER_MILESTONE)

    @property
    def stars_earned_today(self) -> int:
        return min(self.milestones_reached * STARS_PER_MILESTONE, MAX_DAILY_STARS)

    def complete_drills(self, count: int) -> int:
        if count < 0:
            logger.warning("ignoring negative drill count %d", count)
            return 0
        if count == 0:
            return 0

        stars = stars_for_drills(self.drills_completed_today, count)
        self.drills_completed_today += count
        self.last_active_date = self._today()
        if stars > 0:
            self.total_stars += stars
            logger.info(
                "milestone reached: drills_today=%d stars_earned=%d total_stars=%d",
                self.drills_completed_today,
                stars,
                self.total_stars,
            )
        return stars

    def record_drill(self, was_correct: bool) -> int:
        if was_correct:
            return self.complete_drills(1)
        return 0

    def check_for_new_day(self, today: date | None = None) -> bool:
        current = today or self._today()
        if self.last_active_date is None:
            self.last_active_date = current
            return False
        if current > self.last_active_date:
            logger.info(
                "new day %s (last active %s): resetting %d drills",
                current.isoformat(),
                self.last_active_date.isoformat(),
                self.drills_completed_today,
            )
            self.drills_completed_today = 0
            self.last_active_date = current
            return True
        return False

    def reset_daily(self) -> None:
        self.drills_completed_today = 0
        self.last_active_date = self._today()

    def reset_all(self) -> None:
        self.drills_completed_today = 0
        self.total_stars = 0
        self.last_active_date = self._today()
