"""
Logging setup driven by ``Settings``.

``setup_logging`` installs the handlers of the booking service on the
root logger: always the console, plus a file when ``log_file`` is set.
Level, record format and timestamp format all come from the settings
object, and the loggers listed in ``quiet_loggers`` are raised to
``WARNING`` so that per-request noise (``uvicorn.access`` for example)
does not drown the application's own messages.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings


def _level_of(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # ``getLevelName`` answers unknown names with a "Level X" string.
    return level if isinstance(level, int) else logging.INFO


def _build_handlers(settings: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``.

    Nothing is attached when the root logger already has handlers
    (pytest's capture, a server that installs its own, or a second
    ``create_app`` call); the level and the quiet loggers are still
    applied.
    """
    root = logging.getLogger()
    root.setLevel(_level_of(settings.log_level))
    if not root.handlers:
        for handler in _build_handlers(settings):
            root.addHandler(handler)

    for name in filter(None, (part.strip() for part in settings.quiet_loggers.split(","))):
        logging.getLogger(name).setLevel(logging.WARNING)
