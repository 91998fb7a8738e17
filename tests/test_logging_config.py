"""Tests for application logging setup."""

import logging

import pytest

from utils.constants import APP_NAME
from utils.logging_config import get_logger, setup_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger(APP_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


def test_file_handler_receives_child_messages(tmp_path, app_logger):
    log_file = setup_logging(level=logging.INFO, log_dir=tmp_path, console=False)
    get_logger("tests").info("loaded %d words", 3)
    for handler in app_logger.handlers:
        handler.flush()

    assert log_file == tmp_path / f"{APP_NAME}.log"
    assert "loaded 3 words" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(tmp_path, app_logger):
    setup_logging(log_dir=tmp_path)
    setup_logging(level=logging.DEBUG, log_dir=tmp_path)
    assert len(app_logger.handlers) == 2
    assert app_logger.level == logging.DEBUG
