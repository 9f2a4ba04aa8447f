"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(
    log_file: Optional[str] = "logs/hunt.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
):
    """
    Configure logging for applications embedding hunt.

    Two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default), rotated at 10MB, 5 backups

    Per-call details (term counts, blank searches) are logged at DEBUG,
    configuration changes at INFO.

    Args:
        log_file: Path to log file, None for console only
        console_level: Console logging level
        file_level: File logging level
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(min(console_level, file_level) if log_file else console_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    logging.getLogger("hunt").debug(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={log_file} ({logging.getLevelName(file_level)})"
    )
