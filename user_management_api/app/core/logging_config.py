"""
Root logger setup for the user management service.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and, when set,
``LOG_FILE``.  Records look like
``2024-01-15 10:30:00 [INFO] user_management_api.app.services.user_service: Created user 1``.
Passwords and request bodies are never passed to a logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach a console handler, plus a file handler when ``logfile`` is given.

    Does nothing if the root logger already has handlers, so calling
    ``create_app`` twice or running under a test runner that installs
    its own handlers keeps a single configuration.  Unknown level
    names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
