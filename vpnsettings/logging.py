"""
Logging configuration for vpnsettings.

All loggers live under the ``vpnsettings`` namespace. The console handler
colors level names; file output is plain text.
"""

import logging
import sys
from types import TracebackType
from typing import Optional

RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[2m\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1m\033[41m\033[37m",
}

# Level names accepted by the ``log.level`` setting.
SETTINGS_LEVELS = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of each record."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors or record.levelno not in LEVEL_COLORS:
            return super().format(record)

        # Other handlers share the record, so restore the plain level name.
        levelname = record.levelname
        record.levelname = f"{LEVEL_COLORS[record.levelno]}{levelname}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the ``vpnsettings`` logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger("vpnsettings")
    root_logger.setLevel(numeric_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    if numeric_level <= logging.DEBUG:
        console_handler.setFormatter(
            ColoredFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
    else:
        console_handler.setFormatter(ColoredFormatter("[%(levelname)s] %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(
            ColoredFormatter("%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s", use_colors=False)
        )
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``vpnsettings`` namespace.

    Args:
        name: Logger name (typically __name__)
    """
    if not name.startswith("vpnsettings"):
        name = f"vpnsettings.{name}"

    return logging.getLogger(name)


def apply_settings_level(level: Optional[str]) -> None:
    """
    Set the ``vpnsettings`` logger and its handlers to a ``log.level`` value.

    Unknown or unset levels leave the current configuration alone.
    """
    name = SETTINGS_LEVELS.get((level or "").lower())
    if name is None:
        return
    numeric_level = getattr(logging, name)
    root_logger = logging.getLogger("vpnsettings")
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers:
        handler.setLevel(numeric_level)


def format_exception_summary(
    error: BaseException,
    *,
    max_length: int = 180,
) -> str:
    """
    Build a one-line ``ExceptionName: detail`` summary, trimmed to ``max_length``.
    """
    exception_name = error.__class__.__name__
    detail = " ".join(str(error or "").split())
    summary = exception_name if not detail else f"{exception_name}: {detail}"
    if max_length > 3 and len(summary) > max_length:
        return summary[: max_length - 3].rstrip() + "..."
    return summary


def exception_exc_info(
    error: BaseException,
) -> tuple[type[BaseException], BaseException, TracebackType | None]:
    """
    Build an ``exc_info`` tuple suitable for logger calls.
    """
    return (type(error), error, error.__traceback__)


def configure_logging_from_args(verbose: bool = False, log_level: Optional[str] = None,
                                log_file: Optional[str] = None) -> None:
    """
    Configure logging based on CLI arguments.

    Args:
        verbose: If True, set level to DEBUG
        log_level: Explicit log level (overrides verbose)
        log_file: Optional file for log output
    """
    if log_level:
        level = log_level.upper()
    elif verbose:
        level = "DEBUG"
    else:
        level = "INFO"

    setup_logging(level=level, log_file=log_file)
