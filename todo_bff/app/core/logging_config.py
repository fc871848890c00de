"""
Logging configuration for the Todo BFF.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from settings before the FastAPI instance exists, so the
store seeding message and every GraphQL error logged by
``api.graphql.errors`` share one format.  Uvicorn keeps its own
handlers on the ``uvicorn`` loggers; only the root logger is touched.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root level and attach handlers on first use.

    The level is applied on every call, so tests and repeated
    ``create_app()`` calls can change it.  Handlers are added only when
    the root logger has none: a console handler always, and a UTF‑8
    file handler when ``logfile`` is given.

    Parameters
    ----------
    level : str
        Level name such as ``"debug"`` or ``"INFO"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Value of ``LOG_FILE``.  Relative paths resolve against the
        current working directory.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
