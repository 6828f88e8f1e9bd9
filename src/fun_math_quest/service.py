from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date
from typing import Callable

from fun_math_quest.challenge import DailyChallengeTracker
from fun_math_quest.db import Database
from fun_math_quest.drill_session import AnswerFeedback, DrillSessionScorer
from fun_math_quest.game_modes import DEFAULT_QUESTIONS, GameMode
from fun_math_quest.scores import ScoreHistory
from fun_math_quest.time_utils import DEFAULT_TZ, now_local, today_local

logger = logging.getLogger(__name__)


@dataclass
class GameContext:
    db: Database
    challenge: DailyChallengeTracker
    history: ScoreHistory
    tz: str = DEFAULT_TZ
    default_question_count: int = DEFAULT_QUESTIONS
    language: str = "en"

    def start_drill(
        self,
        mode: GameMode,
        total_questions: int | None = None,
        rng: random.Random | None = None,
    ) -> DrillSessionScorer:
        session = DrillSessionScorer(
            mode,
            total_questions if total_questions is not None else self.default_question_count,
            rng=rng,
            clock=lambda: now_local(self.tz),
            challenge=self.challenge,
        )
        session.start()
        return session

    def submit_answer(self, session: DrillSessionScorer, raw: str | None) -> AnswerFeedback | None:
        feedback = session.submit_answer(raw)
        if feedback is None:
            return None
        if not session.mode.is_drill:
            return feedback
        if feedback.is_correct:
            self.db.save_challenge_state(self.challenge.state)
        if feedback.result is not None:
            self.history.add(feedback.result)
            self.db.add_session_result(feedback.result)
        return feedback

    def reset_daily(self) -> None:
        self.challenge.reset_daily()
        self.db.save_challenge_state(self.challenge.state)

    def reset_all(self) -> None:
        self.challenge.reset_all()
        self.db.save_challenge_state(self.challenge.state)

    def clear_history(self) -> None:
        self.history.clear()
        self.db.clear_session_results()

    def set_language(self, lang: str) -> str:
        self.language = self.db.set_language(lang)
        return self.language


def open_game_context(
    db: Database,
    tz: str = DEFAULT_TZ,
    today: Callable[[], date] | None = None,
    default_question_count: int = DEFAULT_QUESTIONS,
    default_language: str = "en",
) -> GameContext:
    clock = today or (lambda: today_local(tz))
    challenge = DailyChallengeTracker(db.load_challenge_state(), today=clock)
    challenge.check_for_new_day()
    db.save_challenge_state(challenge.state)

    history = ScoreHistory(db.list_session_results())
    logger.info(
        "game context opened: drills_today=%d total_stars=%d sessions=%d",
        challenge.drills_completed_today,
        challenge.total_stars,
        len(history),
    )
    return GameContext(
        db=db,
        challenge=challenge,
        history=history,
        tz=tz,
        default_question_count=default_question_count,
        language=db.get_language(default=default_language),
    )
