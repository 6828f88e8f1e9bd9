from __future__ import annotations

import re

ANSWER_PATTERN = re.compile(r"^[+-]?\d+$")


class AnswerParseError(ValueError):
    pass


def parse_answer(raw: str | None) -> int:
    value = (raw or "").strip()
    if not value:
        raise AnswerParseError("Answer is required")

    if not ANSWER_PATTERN.fullmatch(value):
        raise AnswerParseError("Answer must be a whole number")
    return int(value)


def try_parse_answer(raw: str | None) -> int | None:
    try:
        return parse_answer(raw)
    except AnswerParseError:
        return None


def format_duration_mss(seconds: int) -> str:
    total = max(0, seconds)
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"
