from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone

from fun_math_quest.challenge import DailyChallengeTracker
from fun_math_quest.db_models import DailyChallengeState
from fun_math_quest.drill_session import DrillSessionScorer, SessionStatus
from fun_math_quest.game_modes import GameMode


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


def _session(mode: GameMode = GameMode.RANDOM, total: int = 5, **kwargs) -> tuple[DrillSessionScorer, FakeClock]:
    clock = FakeClock(datetime(2026, 3, 10, 16, 0, tzinfo=timezone.utc))
    session = DrillSessionScorer(mode, total, rng=random.Random(9), clock=clock, **kwargs)
    return session, clock


def _answer(session: DrillSessionScorer, correct: bool):
    answer = session.current_question.answer
    return session.submit_answer(str(answer if correct else answer + 1))


def test_not_started_ignores_answers() -> None:
    session, _ = _session()
    assert session.status is SessionStatus.NOT_STARTED
    assert session.submit_answer("10") is None


def test_start_resets_counters() -> None:
    session, _ = _session()
    session.start()
    _answer(session, True)
    session.start()
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.question_index == 1
    assert session.correct_count == 0
    assert session.current_streak == 0
    assert session.best_streak == 0
    assert session.remaining_questions == 5


def test_random_five_question_round() -> None:
    session, clock = _session(GameMode.RANDOM, 5)
    session.start()

    pattern = [True, True, False, True, False]
    feedbacks = []
    for correct in pattern:
        clock.advance(4)
        feedbacks.append(_answer(session, correct))

    assert [f.is_correct for f in feedbacks] == pattern
    assert all(f.result is None for f in feedbacks[:-1])
    result = feedbacks[-1].result
    assert result is not None
    assert feedbacks[-1].is_final
    assert result.correct_answers == 3
    assert result.best_streak == 2
    assert result.total_questions == 5
    assert result.mode is GameMode.RANDOM
    assert result.duration_seconds == 20
    assert session.status is SessionStatus.COMPLETED
    assert session.remaining_questions == 0


def test_invalid_input_does_not_advance() -> None:
    session, _ = _session(GameMode.BY_10, 5)
    session.start()
    question = session.current_question
    assert session.submit_answer("") is None
    assert session.submit_answer("   ") is None
    assert session.submit_answer("seventy") is None
    assert session.question_index == 1
    assert session.current_question == question
    assert session.correct_count == 0


def test_miss_reports_correct_answer_and_resets_streak() -> None:
    session, _ = _session(GameMode.BY_100, 5)
    session.start()
    _answer(session, True)
    expected = session.current_question.answer
    feedback = _answer(session, False)
    assert feedback is not None
    assert feedback.is_correct is False
    assert feedback.correct_answer == expected
    assert session.current_streak == 0
    assert session.best_streak == 1
    assert session.question_index == 3


def test_duration_has_one_second_floor() -> None:
    session, _ = _session(GameMode.DIV_10, 5)
    session.start()
    feedback = None
    for _ in range(5):
        feedback = _answer(session, True)
    assert feedback is not None and feedback.result is not None
    assert feedback.result.duration_seconds == 1
    assert feedback.result.best_streak == 5


def test_completed_session_ignores_answers() -> None:
    session, _ = _session(GameMode.BY_10, 5)
    session.start()
    for _ in range(5):
        _answer(session, False)
    assert session.status is SessionStatus.COMPLETED
    assert session.submit_answer("10") is None


def test_question_count_is_clamped_and_restarts() -> None:
    session, _ = _session(GameMode.BY_10, 3)
    assert session.total_questions == 5
    session.start()
    _answer(session, True)
    session.change_question_count(50)
    assert session.total_questions == 20
    assert session.question_index == 1
    assert session.correct_count == 0
    assert session.status is SessionStatus.IN_PROGRESS


def test_correct_answers_feed_daily_challenge() -> None:
    tracker = DailyChallengeTracker(
        DailyChallengeState(drills_completed_today=8, total_stars=0, last_active_date=date(2026, 3, 10)),
        today=lambda: date(2026, 3, 10),
    )
    session, _ = _session(GameMode.BY_1000, 5, challenge=tracker)
    session.start()
    stars = [_answer(session, c).stars_earned for c in (True, False, True)]
    assert stars == [0, 0, 5]
    assert tracker.drills_completed_today == 10
    assert tracker.total_stars == 5


def test_abandoned_session_keeps_daily_credit() -> None:
    tracker = DailyChallengeTracker(today=lambda: date(2026, 3, 10))
    session, _ = _session(GameMode.RANDOM, 10, challenge=tracker)
    session.start()
    _answer(session, True)
    _answer(session, True)
    assert session.result is None
    assert tracker.drills_completed_today == 2


def test_table_mode_finishes_after_placeholder() -> None:
    session, _ = _session(GameMode.TABLE, 10)
    session.start()
    feedback = session.submit_answer("1")
    assert feedback is not None and feedback.is_correct
    assert feedback.result is not None
    assert session.status is SessionStatus.COMPLETED
    assert feedback.result.total_questions == 1
    assert feedback.result.correct_answers == 1
    assert feedback.result.accuracy_text == "100%"


def test_table_mode_gives_no_daily_credit() -> None:
    tracker = DailyChallengeTracker(DailyChallengeState(drills_completed_today=9), today=lambda: date(2026, 3, 10))
    session, _ = _session(GameMode.TABLE, 10, challenge=tracker)
    session.start()
    feedback = session.submit_answer("1")
    assert feedback is not None and feedback.stars_earned == 0
    assert tracker.drills_completed_today == 9
