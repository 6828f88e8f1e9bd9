from __future__ import annotations

from typing import Final

SUPPORTED_LANGUAGES: Final[set[str]] = {"en", "he"}

MESSAGES: Final[dict[str, dict[str, str]]] = {
    "en": {
        "app_title": "Fun Math Quest",
        "tagline": "Choose a challenge and collect stars!",
        "latest_score": "Latest Score",
        "play_round": "Play a round to see your first score!",
        "question_of": "Question {index} of {total}",
        "what_is_answer": "What is the answer?",
        "streak": "Streak",
        "best": "Best",
        "questions_count": "{count} questions",
        "round_complete": "Round Complete!",
        "got_score": "You got {correct} out of {total} correct.",
        "no_scores": "No scores yet",
        "sessions": "Sessions",
        "accuracy": "Accuracy",
        "best_streak": "Best Streak",
        "time": "Time",
        "dashboard": "Score Dashboard",
        "daily_challenge": "Daily Challenge",
        "complete_100_drills": "Complete {goal} drills today!",
        "todays_progress": "Today's Progress",
        "earn_stars_every": "Earn {stars} stars every {drills} drills",
        "challenge_complete": "Challenge Complete! 🏆",
        "daily_challenge_complete": "Daily Challenge Complete! 🎉",
        "stars_earned": "Stars Earned!",
        "total_stars": "Total stars: {stars}",
        "new_stars": "+{stars} ⭐",
        "you_are_math_champion": "You're a Math Champion! 🌟",
        "great_job": "Great job! 🎉",
        "keep_going": "Keep going! 💪",
        "you_can_do_it": "You can do it! ✨",
        "try_again": "Try again! 💫",
        "almost_there": "Almost there! 🚀",
        "amazing": "Amazing! 🌟",
        "feedback_correct": "Great job!",
        "feedback_incorrect": "Oops! It was {answer}",
        "mode.table": "Multiplication Table",
        "mode.by10": "Multiply by 10",
        "mode.by100": "Multiply by 100",
        "mode.by1000": "Multiply by 1000",
        "mode.div10": "Divide by 10",
        "mode.div100": "Divide by 100",
        "mode.random": "Random Drills",
    },
    "he": {
        "app_title": "מסע מתמטיקה",
        "tagline": "בחרו אתגר ואספו כוכבים!",
        "latest_score": "ניקוד אחרון",
        "play_round": "שחקו סבב כדי לראות ניקוד ראשון!",
        "question_of": "שאלה {index} מתוך {total}",
        "what_is_answer": "מה התשובה?",
        "streak": "רצף",
        "best": "הטוב ביותר",
        "questions_count": "{count} שאלות",
        "round_complete": "הסבב הושלם!",
        "got_score": "עניתם נכון על {correct} מתוך {total}.",
        "no_scores": "אין תוצאות עדיין",
        "sessions": "סבבים",
        "accuracy": "דיוק",
        "best_streak": "רצף שיא",
        "time": "זמן",
        "dashboard": "לוח תוצאות",
        "daily_challenge": "אתגר יומי",
        "complete_100_drills": "השלימו {goal} תרגילים היום!",
        "todays_progress": "ההתקדמות היום",
        "earn_stars_every": "הרוויחו {stars} כוכבים על כל {drills} תרגילים",
        "challenge_complete": "האתגר הושלם! 🏆",
        "daily_challenge_complete": "האתגר היומי הושלם! 🎉",
        "stars_earned": "כוכבים שנצברו!",
        "total_stars": "סך הכוכבים: {stars}",
        "new_stars": "+{stars} ⭐",
        "you_are_math_champion": "אתם אלופי מתמטיקה! 🌟",
        "great_job": "כל הכבוד! 🎉",
        "keep_going": "המשיכו! 💪",
        "you_can_do_it": "אתם יכולים! ✨",
        "try_again": "נסו שוב! 💫",
        "almost_there": "כמעט שם! 🚀",
        "amazing": "מדהים! 🌟",
        "feedback_correct": "כל הכבוד!",
        "feedback_incorrect": "אופס! התשובה היא {answer}",
        "mode.table": "טבלת כפל",
        "mode.by10": "כפל ב־10",
        "mode.by100": "כפל ב־100",
        "mode.by1000": "כפל ב־1000",
        "mode.div10": "חילוק ב־10",
        "mode.div100": "חילוק ב־100",
        "mode.random": "תרגולים אקראיים",
    },
}


def normalize_language_code(raw: str | None, default: str = "en") -> str:
    value = (raw or "").strip().lower()
    # "iw" is the legacy ISO code for Hebrew still sent by some platforms.
    if value.startswith("he") or value.startswith("iw"):
        return "he"
    if value.startswith("en"):
        return "en"
    return default if default in SUPPORTED_LANGUAGES else "en"


def is_rtl(lang: str) -> bool:
    return normalize_language_code(lang) == "he"


def t(key: str, lang: str = "en", **kwargs: object) -> str:
    code = normalize_language_code(lang, default="en")
    template = MESSAGES.get(code, {}).get(key) or MESSAGES["en"].get(key) or key
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template
