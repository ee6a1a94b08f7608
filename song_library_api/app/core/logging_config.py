"""
Logging setup for the Song Library API.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger.  Request lines are written by
the HTTP middleware in ``main`` through the ``ACCESS_LOGGER`` logger,
so Uvicorn's own access log is silenced to avoid logging every request
twice.
"""

import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER = "song_library_api.access"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file, appended to in UTF‑8.
    """
    root = logging.getLogger()
    if root.handlers:
        # Configured already (tests, repeated create_app calls).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
