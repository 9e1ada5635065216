"""Tests for the root logger setup."""

import logging
from contextlib import contextmanager

from user_management_api.app.core.logging_config import setup_logging


@contextmanager
def bare_root_logger():
    """Temporarily strip the root logger of its handlers and restore them after."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_adds_console_and_file(tmp_path):
    logfile = tmp_path / "service.log"
    with bare_root_logger() as root:
        setup_logging("debug", str(logfile))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("user_management_api.test").info("Created user %s", 1)
        for handler in root.handlers:
            handler.flush()

        setup_logging("error")
        assert len(root.handlers) == 2
    assert "[INFO] user_management_api.test: Created user 1" in logfile.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info():
    with bare_root_logger() as root:
        setup_logging("chatty")
        assert root.level == logging.INFO
