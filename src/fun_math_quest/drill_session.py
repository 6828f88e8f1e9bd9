from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

from fun_math_quest.answers import try_parse_answer
from fun_math_quest.challenge import DailyChallengeTracker
from fun_math_quest.db_models import SessionResult
from fun_math_quest.game_modes import DEFAULT_QUESTIONS, GameMode, clamp_question_count
from fun_math_quest.questions import PLACEHOLDER_QUESTION, Question, build_question_pool
from fun_math_quest.time_utils import elapsed_seconds

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class AnswerFeedback:
    question: Question
    is_correct: bool
    correct_answer: int
    stars_earned: int = 0
    result: SessionResult | None = None

    @property
    def is_final(self) -> bool:
        return self.result is not None


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class DrillSessionScorer:
    def __init__(
        self,
        mode: GameMode,
        total_questions: int = DEFAULT_QUESTIONS,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        challenge: DailyChallengeTracker | None = None,
    ) -> None:
        self.mode = mode
        self.total_questions = clamp_question_count(total_questions)
        self.rng = rng or random.Random()
        self.clock = clock or _utc_now
        self.challenge = challenge

        self.status = SessionStatus.NOT_STARTED
        self.question_index = 1
        self.correct_count = 0
        self.current_streak = 0
        self.best_streak = 0
        self.started_at: datetime | None = None
        self.current_question: Question = PLACEHOLDER_QUESTION
        self.result: SessionResult | None = None
        self._queue: list[Question] = []

    @property
    def remaining_questions(self) -> int:
        if self.status is SessionStatus.COMPLETED:
            return 0
        return self.total_questions - self.question_index + 1

    @property
    def progress(self) -> float:
        return self.question_index / self.total_questions

    def start(self) -> None:
        self.started_at = self.clock()
        self.question_index = 1
        self.correct_count = 0
        self.current_streak = 0
        self.best_streak = 0
        self.result = None
        self._queue = build_question_pool(self.mode, self.total_questions, self.rng)
        if not self.mode.is_drill:
            # Table mode only carries its placeholder question.
            self.total_questions = len(self._queue)
        self.current_question = self._queue.pop(0) if self._queue else PLACEHOLDER_QUESTION
        self.status = SessionStatus.IN_PROGRESS
        logger.info("session started: mode=%s questions=%d", self.mode.name, self.total_questions)

    def change_question_count(self, total_questions: int) -> None:
        self.total_questions = clamp_question_count(total_questions)
        self.start()

    def submit_answer(self, raw: str | None) -> AnswerFeedback | None:
        if self.status is not SessionStatus.IN_PROGRESS:
            return None
        answer = try_parse_answer(raw)
        if answer is None:
            return None

        question = self.current_question
        is_correct = answer == question.answer
        if is_correct:
            self.correct_count += 1
            self.current_streak += 1
            self.best_streak = max(self.best_streak, self.current_streak)
        else:
            self.current_streak = 0

        stars = 0
        if self.challenge is not None and self.mode.is_drill:
            stars = self.challenge.record_drill(is_correct)
        result = self._advance()
        return AnswerFeedback(
            question=question,
            is_correct=is_correct,
            correct_answer=question.answer,
            stars_earned=stars,
            result=result,
        )

    def _advance(self) -> SessionResult | None:
        if self.question_index >= self.total_questions or not self._queue:
            return self._finish()
        self.question_index += 1
        self.current_question = self._queue.pop(0)
        return None

    def _finish(self) -> SessionResult:
        now = self.clock()
        started = self.started_at or now
        self.result = SessionResult(
            mode=self.mode,
            total_questions=self.total_questions,
            correct_answers=self.correct_count,
            best_streak=self.best_streak,
            duration_seconds=max(elapsed_seconds(started, now), 1),
            date=now,
        )
        self.status = SessionStatus.COMPLETED
        logger.info(
            "session completed: mode=%s correct=%d/%d best_streak=%d",
            self.mode.name,
            self.correct_count,
            self.total_questions,
            self.best_streak,
        )
        return self.result
