"""
Unit tests for logging setup.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from hunt.logging_config import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_and_file_handlers(root_logger, tmp_path):
    log_file = tmp_path / "logs" / "hunt.log"
    setup_logging(str(log_file), console_level=logging.WARNING, file_level=logging.DEBUG)

    assert log_file.parent.is_dir()
    assert len(root_logger.handlers) == 2
    file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.DEBUG
    assert root_logger.level == logging.DEBUG


def test_console_only(root_logger):
    setup_logging(None, console_level=logging.INFO)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_no_duplicate_handlers(root_logger, tmp_path):
    setup_logging(str(tmp_path / "hunt.log"))
    setup_logging(str(tmp_path / "hunt.log"))
    assert len(root_logger.handlers) == 2
