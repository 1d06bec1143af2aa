"""
Logging setup driven by ``Settings``.

Handlers are attached to the ``forum_api`` package logger rather than
the root logger, so uvicorn keeps ownership of its own loggers while
every ``logging.getLogger(__name__)`` in this package inherits the
configured level and handlers.  Records still propagate to the root
logger.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated create_app calls do not stack them.
_HANDLER_FLAG = "_forum_api_handler"


def setup_logging(settings: Settings, logger_name: str = "forum_api") -> logging.Logger:
    """Configure ``logger_name`` from ``settings.log_level`` and ``settings.log_file``.

    A console handler is always installed; a UTF-8 file handler is added
    when ``log_file`` is set.  Unknown level names fall back to INFO.
    Calling this again only updates the level.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if any(getattr(handler, _HANDLER_FLAG, False) for handler in logger.handlers):
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)

    # Per-request access lines are noise unless debugging.
    if logger.level > logging.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logger
