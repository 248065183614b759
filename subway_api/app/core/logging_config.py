"""
Logging configuration for the application.

``setup_logging`` sets the root logger level on every call, so a second
application built with different settings (as the tests do) still gets
the level it asked for.  Handlers are attached only once per process.
With ``debug`` enabled (``DEBUG=true``) the level is forced to ``DEBUG``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated calls can recognise them.
_HANDLER_ATTR = "_subway_api_handler"


def resolve_level(level: str, debug: bool = False) -> int:
    """Translate a level name into a ``logging`` constant.

    Unknown names fall back to ``INFO``; ``debug`` always wins.
    """
    if debug:
        return logging.DEBUG
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    debug : bool
        Force ``DEBUG`` regardless of ``level``.
    """
    root = logging.getLogger()
    root.setLevel(resolve_level(level, debug))

    if any(getattr(handler, _HANDLER_ATTR, False) for handler in root.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
