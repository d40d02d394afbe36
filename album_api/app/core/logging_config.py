"""
Logging configuration for the Album API.

``setup_logging`` configures the root logger once per process with a
console handler and an optional file handler.  Access lines come from
the ``album_api.access`` logger written by the request middleware.
They follow the root level; ``ACCESS_LOG=false`` raises that logger
to ``WARNING`` so only application messages remain.  The server
runner disables uvicorn's own access log, so each request is logged
once.
"""

import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER = "album_api.access"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_from_name(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = True) -> None:
    """Configure application logging.

    The access logger level is applied on every call.  Handlers are
    attached to the root logger only when it has none yet, e.g. not
    under pytest or after a previous ``create_app`` call.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    access_log : bool
        Whether per-request access lines are emitted.
    """
    logging.getLogger(ACCESS_LOGGER).setLevel(logging.NOTSET if access_log else logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level_from_name(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
