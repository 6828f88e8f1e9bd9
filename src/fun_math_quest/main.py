from __future__ import annotations

from pathlib import Path

from fun_math_quest.config import load_settings
from fun_math_quest.db import Database
from fun_math_quest.logging_setup import setup_logging
from fun_math_quest.service import GameContext, open_game_context


def open_app(config_path: Path | None = None) -> GameContext:
    """Load settings and persisted state; what the presentation layer calls at launch."""
    settings = load_settings(config_path)
    setup_logging(settings.log_level)
    db = Database(settings.database_path)
    return open_game_context(
        db,
        tz=settings.tz,
        default_question_count=settings.default_question_count,
        default_language=settings.language,
    )
