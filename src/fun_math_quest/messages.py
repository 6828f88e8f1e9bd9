from __future__ import annotations

from fun_math_quest.challenge import (
    DAILY_GOAL,
    DRILLS_PER_MILESTONE,
    MAX_DAILY_STARS,
    STARS_PER_MILESTONE,
    DailyChallengeTracker,
)
from fun_math_quest.db_models import SessionResult
from fun_math_quest.drill_session import AnswerFeedback, DrillSessionScorer
from fun_math_quest.game_modes import GameMode
from fun_math_quest.i18n import t
from fun_math_quest.scores import ScoreHistory

MODE_TITLE_KEYS: dict[GameMode, str] = {
    GameMode.TABLE: "mode.table",
    GameMode.BY_10: "mode.by10",
    GameMode.BY_100: "mode.by100",
    GameMode.BY_1000: "mode.by1000",
    GameMode.DIV_10: "mode.div10",
    GameMode.DIV_100: "mode.div100",
    GameMode.RANDOM: "mode.random",
}


def _bar(ratio: float, width: int = 20) -> str:
    filled = max(0, min(width, int(round(ratio * width))))
    return "█" * filled + "░" * (width - filled)


def mode_title(mode: GameMode, lang: str = "en") -> str:
    return t(MODE_TITLE_KEYS[mode], lang)


def question_header(session: DrillSessionScorer, lang: str = "en") -> str:
    return t("question_of", lang, index=session.question_index, total=session.total_questions)


def feedback_message(feedback: AnswerFeedback, lang: str = "en") -> str:
    if feedback.is_correct:
        text = t("feedback_correct", lang)
    else:
        text = t("feedback_incorrect", lang, answer=feedback.correct_answer)
    if feedback.stars_earned > 0:
        text = f"{text} {t('new_stars', lang, stars=feedback.stars_earned)}"
    return text


def streak_line(session: DrillSessionScorer, lang: str = "en") -> str:
    return f"{t('streak', lang)}: {session.current_streak} • {t('best', lang)}: {session.best_streak}"


def round_summary(result: SessionResult, lang: str = "en") -> str:
    return "\n".join(
        [
            t("round_complete", lang),
            t("got_score", lang, correct=result.correct_answers, total=result.total_questions),
        ]
    )


def session_line(result: SessionResult, lang: str = "en") -> str:
    return (
        f"{t('accuracy', lang)}: {result.accuracy_text} • "
        f"{t('best_streak', lang)}: {result.best_streak} • "
        f"{t('time', lang)}: {result.duration_text}"
    )


def latest_score_message(history: ScoreHistory, lang: str = "en") -> str:
    latest = history.latest
    if latest is None:
        return t("play_round", lang)
    return "\n".join(
        [
            t("latest_score", lang),
            f"{mode_title(latest.mode, lang)}: {latest.correct_answers}/{latest.total_questions}",
            f"{t('accuracy', lang)}: {latest.accuracy_text} • {t('best_streak', lang)}: {latest.best_streak}",
        ]
    )


def dashboard_message(history: ScoreHistory, lang: str = "en") -> str:
    if not history.sessions:
        return "\n".join([t("dashboard", lang), "", t("no_scores", lang)])
    lines = [
        t("dashboard", lang),
        "",
        f"{t('sessions', lang)}: {len(history)}",
        f"{t('accuracy', lang)}: {history.average_accuracy_text}",
        f"{t('best_streak', lang)}: {history.top_streak}",
        "",
    ]
    for result in history.sessions:
        lines.append(f"{mode_title(result.mode, lang)} — {result.correct_answers}/{result.total_questions}")
        lines.append(f"  {session_line(result, lang)}")
    return "\n".join(lines)


def daily_challenge_card(tracker: DailyChallengeTracker, lang: str = "en") -> str:
    title = t("challenge_complete", lang) if tracker.is_daily_complete else t("daily_challenge", lang)
    return "\n".join(
        [
            title,
            t("complete_100_drills", lang, goal=DAILY_GOAL),
            f"{t('todays_progress', lang)}: {tracker.drills_completed_today}/{DAILY_GOAL}",
            f"{_bar(tracker.progress)} {tracker.progress * 100:.0f}%",
            t("earn_stars_every", lang, stars=STARS_PER_MILESTONE, drills=DRILLS_PER_MILESTONE),
            f"⭐ {tracker.stars_earned_today}/{MAX_DAILY_STARS} • {t('total_stars', lang, stars=tracker.total_stars)}",
        ]
    )


def share_achievement_text(stars_earned: int = MAX_DAILY_STARS, lang: str = "en") -> str:
    return "\n".join(
        [
            f"🏆 {t('app_title', lang)} 🏆",
            t("daily_challenge_complete", lang),
            f"{stars_earned} {t('stars_earned', lang)}",
            t("you_are_math_champion", lang),
        ]
    )
