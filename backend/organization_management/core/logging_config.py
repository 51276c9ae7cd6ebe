from __future__ import annotations

import logging
import sys

from organization_management.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "organization_management"

# Chatty third-party loggers kept at WARNING unless DEBUG is on.
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "multipart")


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper()

    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if settings.DEBUG else logging.WARNING)
