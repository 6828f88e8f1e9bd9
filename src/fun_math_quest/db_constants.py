from __future__ import annotations

from typing import Any

DRILLS_KEY = "funmath.dailyDrills"
STARS_KEY = "funmath.totalStars"
LAST_DATE_KEY = "funmath.lastChallengeDate"
LANGUAGE_KEY = "funmath.language"

CHALLENGE_KEYS = (DRILLS_KEY, STARS_KEY, LAST_DATE_KEY)

APP_CONFIG_DEFAULTS: dict[str, Any] = {
    LANGUAGE_KEY: "en",
}
