"""Logging for Passbook.

A single ``passbook`` logger feeds a daily log file and the console. Module
loggers such as ``passbook.db.account_store`` propagate into it. Every record
written to the file is tagged with the owner whose accounts the session
works on, so one log directory can be shared by several users.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from config import Config

LOGGER_NAME = "passbook"
NO_OWNER = "-"

FILE_FORMAT = "%(asctime)s [%(owner)s] %(name)s %(levelname)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class OwnerFilter(logging.Filter):
    """Stamp each record with the session owner."""

    def __init__(self, owner: str = ""):
        super().__init__()
        self.owner = owner or NO_OWNER

    def filter(self, record: logging.LogRecord) -> bool:
        record.owner = self.owner
        return True


def log_file_path(config: Config, day: Optional[date] = None) -> Path:
    """Path of the log file for ``day`` (today by default)."""
    day = day or date.today()
    return config.log_dir / f"passbook-{day.isoformat()}.log"


def setup_logging(config: Config, owner: str = "") -> logging.Logger:
    """Attach file and console handlers to the passbook logger.

    Calling this again replaces the handlers from the previous call, so a
    second session in the same process logs under its own owner.

    Args:
        config: Application configuration containing log settings.
        owner: Username for the session, shown in every file record.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    owner_filter = OwnerFilter(owner)

    file_handler = logging.FileHandler(log_file_path(config), encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    # Handler-level filter so records propagated from module loggers get it too
    for handler in (file_handler, console_handler):
        handler.setLevel(config.log_level)
        handler.addFilter(owner_filter)
        logger.addHandler(handler)

    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
