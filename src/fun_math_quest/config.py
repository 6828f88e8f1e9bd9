from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from fun_math_quest.game_modes import DEFAULT_QUESTIONS, clamp_question_count
from fun_math_quest.i18n import normalize_language_code
from fun_math_quest.time_utils import DEFAULT_TZ

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    database_path: Path
    tz: str
    language: str
    default_question_count: int
    log_level: str


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        raw = line.strip()
        if not raw or raw.startswith("#") or "=" not in raw:
            continue
        key, value = raw.split("=", maxsplit=1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def load_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        logger.warning("ignoring unreadable config file %s: %s", path, exc)
        return {}
    if not isinstance(raw, dict):
        logger.warning("ignoring config file %s: top level is not a mapping", path)
        return {}
    return raw


def _parse_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def load_settings(config_path: Path | None = None) -> Settings:
    _load_env_file(Path(".env"))

    path = config_path or Path(os.getenv("FUNMATH_CONFIG", "./funmath.yaml"))
    file_cfg = load_config_file(path)

    db_path = Path(os.getenv("DATABASE_PATH") or file_cfg.get("database_path") or "./data/funmath.db")
    tz = os.getenv("TZ") or str(file_cfg.get("tz") or DEFAULT_TZ)
    language = normalize_language_code(os.getenv("FUNMATH_LANGUAGE") or file_cfg.get("language"))
    questions_raw = os.getenv("FUNMATH_QUESTIONS", file_cfg.get("default_question_count", DEFAULT_QUESTIONS))
    questions = clamp_question_count(_parse_int(questions_raw, DEFAULT_QUESTIONS))
    log_level = str(os.getenv("LOG_LEVEL") or file_cfg.get("log_level") or "INFO").upper()

    return Settings(
        database_path=db_path,
        tz=tz,
        language=language,
        default_question_count=questions,
        log_level=log_level,
    )
