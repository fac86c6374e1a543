"""
Logging infrastructure for the candlescope analysis toolkit.

Library modules only call ``logging.getLogger(__name__)``. Handlers are
attached here, by the application (the CLI), from ``Config.logging``.
"""

import logging
import logging.handlers
import re
import sys
from pathlib import Path
from typing import Optional

from .config import LoggingConfig

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Record attributes rendered as "[value]" prefixes, in this order
CONTEXT_FIELDS = ("source", "timeframe")

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
_SIZE_UNITS = {"": 1, "B": 1, "KB": 1024, "MB": 1024 ** 2, "GB": 1024 ** 3}
_SIZE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([KMG]?B)?")


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',     # Cyan
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = original


class ContextFormatter(logging.Formatter):
    """File formatter that prefixes the analysis context of a record."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = "".join(
            f"[{getattr(record, field)}] "
            for field in CONTEXT_FIELDS
            if getattr(record, field, None)
        )
        return prefix + message


class AnalysisLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that tags records with the candle source and timeframe."""

    def process(self, msg, kwargs):
        kwargs['extra'] = {**self.extra, **kwargs.get('extra', {})}
        return msg, kwargs


def parse_size(size: str) -> int:
    """
    Parse a size such as '10MB', '512kb' or '2048' into bytes.

    Unparseable values fall back to 10MB.
    """
    match = _SIZE_PATTERN.fullmatch(size.strip().upper())
    if not match:
        return DEFAULT_MAX_BYTES

    number, unit = match.groups()
    return int(float(number) * _SIZE_UNITS[unit or ""])


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_file: str, level: int, max_size: str, backup_count: int) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=parse_size(max_size),
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(ContextFormatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_size: str = "10MB",
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    Set up a logger with optional console output and file rotation.

    Calling it again for the same name replaces the previous handlers.

    Args:
        name: Logger name, normally "candlescope" so every module logger
            below it inherits the handlers
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to a rotating log file (optional)
        max_size: File size before rotation, e.g. '10MB'
        backup_count: Number of rotated files to keep
        console_output: Whether to log to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logger.setLevel(log_level)

    if console_output:
        logger.addHandler(_console_handler(log_level))
    if log_file:
        logger.addHandler(_file_handler(log_file, log_level, max_size, backup_count))

    logger.propagate = False
    return logger


def configure_logging(config: LoggingConfig, name: str = "candlescope") -> logging.Logger:
    """Set up the package logger from a :class:`LoggingConfig`."""
    return setup_logger(
        name,
        level=config.level,
        log_file=config.file_path,
        max_size=config.max_size,
        backup_count=config.backup_count,
    )


def get_logger(name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Get a console logger (plus optional file) with default settings."""
    return setup_logger(name=name, level=level, log_file=log_file)


def get_analysis_adapter(
    logger: logging.Logger,
    source: Optional[str] = None,
    timeframe: Optional[str] = None
) -> AnalysisLoggerAdapter:
    """
    Wrap ``logger`` so every record carries the analysis context.

    Args:
        logger: Logger to wrap
        source: Where the candles came from (file name, 'synthetic')
        timeframe: Candle interval, e.g. '5m'
    """
    extra = {}
    if source:
        extra['source'] = source
    if timeframe:
        extra['timeframe'] = timeframe
    return AnalysisLoggerAdapter(logger, extra)
