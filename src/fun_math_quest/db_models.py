from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from fun_math_quest.answers import format_duration_mss
from fun_math_quest.game_modes import GameMode


@dataclass(frozen=True)
class DailyChallengeState:
    drills_completed_today: int = 0
    total_stars: int = 0
    last_active_date: date | None = None


@dataclass(frozen=True)
class SessionResult:
    mode: GameMode
    total_questions: int
    correct_answers: int
    best_streak: int
    duration_seconds: int
    date: datetime
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def accuracy_percent(self) -> float:
        if self.total_questions <= 0:
            return 0.0
        return self.correct_answers / self.total_questions * 100

    @property
    def accuracy_text(self) -> str:
        return f"{self.accuracy_percent:.0f}%"

    @property
    def duration_text(self) -> str:
        return format_duration_mss(self.duration_seconds)
