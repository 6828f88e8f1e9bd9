from __future__ import annotations

from collections.abc import Iterable

from fun_math_quest.db_models import SessionResult
from fun_math_quest.game_modes import GameMode


class ScoreHistory:
    """Newest-first log of finished sessions."""

    def __init__(self, sessions: Iterable[SessionResult] | None = None) -> None:
        self.sessions: list[SessionResult] = list(sessions or [])

    def __len__(self) -> int:
        return len(self.sessions)

    @property
    def latest(self) -> SessionResult | None:
        return self.sessions[0] if self.sessions else None

    def add(self, result: SessionResult) -> None:
        self.sessions.insert(0, result)

    def clear(self) -> None:
        self.sessions = []

    def for_mode(self, mode: GameMode) -> list[SessionResult]:
        return [s for s in self.sessions if s.mode is mode]

    @property
    def average_accuracy_percent(self) -> float:
        total_questions = sum(s.total_questions for s in self.sessions)
        if total_questions <= 0:
            return 0.0
        total_correct = sum(s.correct_answers for s in self.sessions)
        return total_correct / total_questions * 100

    @property
    def average_accuracy_text(self) -> str:
        return f"{self.average_accuracy_percent:.0f}%"

    @property
    def top_streak(self) -> int:
        return max((s.best_streak for s in self.sessions), default=0)
