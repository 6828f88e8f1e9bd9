from __future__ import annotations

from enum import Enum

MIN_QUESTIONS = 5
MAX_QUESTIONS = 20
DEFAULT_QUESTIONS = 10


class GameMode(str, Enum):
    TABLE = "Multiplication Table"
    BY_10 = "Multiply by 10"
    BY_100 = "Multiply by 100"
    BY_1000 = "Multiply by 1000"
    DIV_10 = "Divide by 10"
    DIV_100 = "Divide by 100"
    RANDOM = "Random Drills"

    @property
    def is_drill(self) -> bool:
        return self is not GameMode.TABLE

    @property
    def description(self) -> str:
        return MODE_DESCRIPTIONS[self]


MODE_DESCRIPTIONS: dict[GameMode, str] = {
    GameMode.TABLE: "Learn the full 1–12 table in a colorful grid.",
    GameMode.BY_10: "Practice multiplying any number by 10.",
    GameMode.BY_100: "Practice multiplying any number by 100.",
    GameMode.BY_1000: "Practice multiplying any number by 1000.",
    GameMode.DIV_10: "Practice dividing by 10 with clean answers.",
    GameMode.DIV_100: "Practice dividing by 100 with clean answers.",
    GameMode.RANDOM: "Quick-fire random multiplication questions.",
}

# Fixed factor for the single-operand modes.
MULTIPLY_FACTORS: dict[GameMode, int] = {
    GameMode.BY_10: 10,
    GameMode.BY_100: 100,
    GameMode.BY_1000: 1000,
}

DIVISORS: dict[GameMode, int] = {
    GameMode.DIV_10: 10,
    GameMode.DIV_100: 100,
}


def drill_modes() -> list[GameMode]:
    return [mode for mode in GameMode if mode.is_drill]


def parse_mode(raw: str | None) -> GameMode | None:
    if raw is None:
        return None
    value = raw.strip()
    for mode in GameMode:
        if value == mode.value or value.upper() == mode.name:
            return mode
    return None


def clamp_question_count(value: int) -> int:
    return max(MIN_QUESTIONS, min(MAX_QUESTIONS, int(value)))
