from __future__ import annotations

import random
from enum import Enum

from fun_math_quest.i18n import t


class MascotMood(str, Enum):
    HAPPY = "happy"
    EXCITED = "excited"
    ENCOURAGING = "encouraging"
    THINKING = "thinking"
    WAVING = "waving"


POSITIVE_KEYS = ("great_job", "amazing", "keep_going")
ENCOURAGING_KEYS = ("try_again", "you_can_do_it", "almost_there")


def mood_for_feedback(is_correct: bool) -> MascotMood:
    return MascotMood.EXCITED if is_correct else MascotMood.ENCOURAGING


def pick_encouragement(is_correct: bool, rng: random.Random | None = None, lang: str = "en") -> str:
    pool = POSITIVE_KEYS if is_correct else ENCOURAGING_KEYS
    return t((rng or random).choice(pool), lang)
