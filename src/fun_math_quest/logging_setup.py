from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def setup_logging(level: str | int = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured

    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = level

    root = logging.getLogger()
    if not _configured:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        _configured = True
    root.setLevel(resolved)
