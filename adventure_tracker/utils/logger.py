"""Logging configuration using loguru."""

import sys
from pathlib import Path
from loguru import logger

# Silent until setup_logger() is called
logger.remove()

_logger = logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)


def setup_logger(
    level: str = "INFO",
    log_dir: str = "logs",
    console: bool = True,
    file: bool = True,
    retention_days: int = 7,
) -> None:
    """
    Configure the logger, replacing any handlers added before.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the tracker and error logs
        console: Log to stderr
        file: Write log files to log_dir
        retention_days: Days a daily tracker log is kept; error logs
            are kept four times as long
    """
    _logger.remove()

    if console:
        _logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if file:
        add_file_handlers(level=level, log_dir=log_dir, retention_days=retention_days)


def add_file_handlers(level: str = "INFO", log_dir: str = "logs", retention_days: int = 7) -> None:
    """Attach the daily tracker log and the error-only log."""
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    _logger.add(
        log_path / "tracker_{time:YYYY-MM-DD}.log",
        format=FILE_FORMAT,
        level=level,
        rotation="00:00",
        retention=f"{retention_days} days",
    )
    _logger.add(
        log_path / "errors_{time:YYYY-MM-DD}.log",
        format=FILE_FORMAT,
        level="ERROR",
        rotation="00:00",
        retention=f"{retention_days * 4} days",
    )


def get_logger():
    """Get the configured logger instance."""
    return _logger
