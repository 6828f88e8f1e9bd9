from __future__ import annotations

import logging
import sqlite3
from typing import Any, Protocol

from fun_math_quest.db_constants import APP_CONFIG_DEFAULTS, LANGUAGE_KEY
from fun_math_quest.i18n import normalize_language_code

logger = logging.getLogger(__name__)


class DbProtocol(Protocol):
    def _kv_get_many(self, keys: tuple[str, ...]) -> dict[str, Any]: ...
    def _kv_set_many(self, values: dict[str, Any]) -> None: ...
    def get_app_config(self) -> dict[str, Any]: ...
    def set_app_config(self, updates: dict[str, Any]) -> dict[str, Any]: ...


class SystemMixin:
    def get_app_config(self: DbProtocol) -> dict[str, Any]:
        config = dict(APP_CONFIG_DEFAULTS)
        try:
            stored = self._kv_get_many(tuple(APP_CONFIG_DEFAULTS))
        except sqlite3.Error as exc:
            logger.warning("could not load app config, using defaults: %s", exc)
            return config
        config.update(stored)
        return config

    def set_app_config(self: DbProtocol, updates: dict[str, Any]) -> dict[str, Any]:
        known = {k: v for k, v in updates.items() if k in APP_CONFIG_DEFAULTS}
        if known:
            try:
                self._kv_set_many(known)
            except sqlite3.Error as exc:
                logger.warning("could not save app config: %s", exc)
        return self.get_app_config()

    def get_language(self: DbProtocol, default: str = "en") -> str:
        """Stored language preference, or *default* when the user never picked one."""
        try:
            stored = self._kv_get_many((LANGUAGE_KEY,)).get(LANGUAGE_KEY)
        except sqlite3.Error as exc:
            logger.warning("could not load language preference: %s", exc)
            stored = None
        return normalize_language_code(stored if isinstance(stored, str) else None, default=default)

    def set_language(self: DbProtocol, lang: str) -> str:
        code = normalize_language_code(lang)
        self.set_app_config({LANGUAGE_KEY: code})
        return code
