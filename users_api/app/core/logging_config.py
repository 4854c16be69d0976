"""
Logging setup for the Users API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Every module logs through
``logging.getLogger(__name__)`` and relies on this configuration.

Uvicorn's own access log is lowered to WARNING because the request
logging middleware already records every request together with its
body and response.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers whose output duplicates what the middleware already writes.
_QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
        Resolved relative to the current working directory.

    Returns
    -------
    bool
        ``True`` if handlers were installed, ``False`` if the root
        logger already had handlers and was left untouched.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, by an earlier create_app() call or by the
        # host process (uvicorn --log-config, pytest).
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return True
