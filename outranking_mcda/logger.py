# -*- coding: utf-8 -*-
"""
Logging for outranking computations.

The package logs under ``outranking_mcda.<subpackage>.<module>``. Nothing
is printed until an application calls :func:`setup_logger` (plain output),
:meth:`LoggerFactory.setup` (coloured console) or :func:`setup_from_config`.
Calculators log their results at INFO and matrix sizes, weight windows and
timings at DEBUG; a log file always receives DEBUG.
"""

import logging
import logging.handlers
import sys
import os
import re
import time
from pathlib import Path
from typing import Optional, Dict, Union, Callable
from contextlib import contextmanager
from functools import wraps


LOG_NAME = "outranking_mcda"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
PLAIN_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
COLORED_CONSOLE_FORMAT = "%(asctime)s │ %(levelname)s │ %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

RESET = "\033[0m"
BOLD = "\033[1m"
_ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    """Remove terminal colour codes from ``text``."""
    return _ANSI_PATTERN.sub('', text)


def terminal_supports_color() -> bool:
    """NO_COLOR and FORCE_COLOR win over the tty check."""
    if os.getenv("NO_COLOR"):
        return False
    if os.getenv("FORCE_COLOR"):
        return True
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _as_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


# =============================================================================
# Formatters
# =============================================================================

class ColoredFormatter(logging.Formatter):
    """Console formatter colouring the level name and message by severity."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[91m" + BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and terminal_supports_color()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)
        # Other handlers share the record
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, "")
        record.levelname = f"{color}{BOLD}{record.levelname:8}{RESET}"
        record.msg = f"{color}{record.msg}{RESET}"
        return super().format(record)


class CleanFormatter(logging.Formatter):
    """Formatter for files and plain consoles; drops colour codes from messages."""

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, str) and '\033[' in record.msg:
            record = logging.makeLogRecord(record.__dict__)
            record.msg = strip_ansi(record.msg)
        return super().format(record)


# =============================================================================
# Logger Factory
# =============================================================================

class LoggerFactory:
    """
    Configures the package logger and hands out module loggers.

    Module loggers are children of ``outranking_mcda`` and carry no handler
    of their own, so an application embedding the package keeps control of
    its logging until it calls :meth:`setup`.
    """

    _loggers: Dict[str, logging.Logger] = {}
    _root_logger: Optional[logging.Logger] = None

    @classmethod
    def setup(
        cls,
        name: str = LOG_NAME,
        level: Union[int, str] = logging.INFO,
        log_file: Optional[Path] = None,
        console: bool = True,
        use_colors: bool = True,
        max_bytes: int = MAX_LOG_SIZE,
        backup_count: int = BACKUP_COUNT,
    ) -> logging.Logger:
        """
        Attach handlers to the package logger.

        Parameters
        ----------
        name : str
            Logger name
        level : int or str
            Console level ('DEBUG', 'INFO', ... or a ``logging`` constant)
        log_file : Path, optional
            Rotating plain text log file, written at DEBUG level
        console : bool
            Log to stdout
        use_colors : bool
            Colour console output when the terminal allows it
        max_bytes, backup_count : int
            Rotation size and number of kept files

        Returns
        -------
        logging.Logger
        """
        level = _as_level(level)
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = False

        if console:
            logger.addHandler(cls._console_handler(level, use_colors))
        if log_file:
            logger.addHandler(cls._file_handler(Path(log_file), max_bytes, backup_count))
            level = logging.DEBUG
        logger.setLevel(level)

        cls._root_logger = logger
        cls._loggers[name] = logger
        return logger

    @staticmethod
    def _console_handler(level: int, use_colors: bool) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        if use_colors:
            handler.setFormatter(ColoredFormatter(COLORED_CONSOLE_FORMAT, CONSOLE_DATE_FORMAT))
        else:
            handler.setFormatter(CleanFormatter(PLAIN_CONSOLE_FORMAT, CONSOLE_DATE_FORMAT))
        return handler

    @staticmethod
    def _file_handler(log_file: Path, max_bytes: int, backup_count: int) -> logging.Handler:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(CleanFormatter(FILE_FORMAT, FILE_DATE_FORMAT))
        return handler

    @classmethod
    def get_logger(cls, name: str = LOG_NAME) -> logging.Logger:
        """Logger ``name``, placed under the package logger when it is not already."""
        if name in cls._loggers:
            return cls._loggers[name]

        root_name = cls._root_logger.name if cls._root_logger else LOG_NAME
        if name == root_name or name.startswith(root_name + "."):
            logger = logging.getLogger(name)
        else:
            logger = logging.getLogger(f"{root_name}.{name}")
        cls._loggers[name] = logger
        return logger

    @classmethod
    def get_module_logger(cls, module_name: str) -> logging.Logger:
        """Logger of a package module, e.g. 'outranking.concordance'."""
        root_name = cls._root_logger.name if cls._root_logger else LOG_NAME
        return cls.get_logger(f"{root_name}.{module_name}")

    @classmethod
    def reset(cls) -> None:
        """Detach configured handlers, mainly for tests."""
        if cls._root_logger is not None:
            cls._root_logger.handlers.clear()
            cls._root_logger.propagate = True
        cls._loggers = {}
        cls._root_logger = None


# =============================================================================
# Convenience Functions
# =============================================================================

def setup_logger(
    name: str = LOG_NAME,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True
) -> logging.Logger:
    """Configure the package logger with uncoloured output."""
    return LoggerFactory.setup(name=name, level=level, log_file=log_file,
                               console=console, use_colors=False)


def setup_from_config(config=None) -> logging.Logger:
    """Setup the package logger from a :class:`~outranking_mcda.config.Config`."""
    from .config import get_config
    config = config or get_config()
    return setup_logger(
        level=config.logging.level,
        log_file=config.logging.log_file,
        console=config.logging.console
    )


def get_logger(name: str = LOG_NAME) -> logging.Logger:
    return LoggerFactory.get_logger(name)


def get_module_logger(module_name: str) -> logging.Logger:
    return LoggerFactory.get_module_logger(module_name)


# =============================================================================
# Decorators & Context Managers
# =============================================================================

def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> Callable:
    """
    Decorator logging a call, its duration and any exception it raises.

    Parameters
    ----------
    logger : logging.Logger, optional
        Defaults to the package logger
    level : int
        Level of the call and completion messages
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger if logger is not None else get_logger()
            name = func.__qualname__
            log.log(level, f"Calling {name}")
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.error(f"{name} failed after {time.time() - start:.3f}s: {e}")
                raise
            log.log(level, f"{name} completed ({time.time() - start:.3f}s)")
            return result

        return wrapper
    return decorator


@contextmanager
def timed_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO
):
    """
    Log the start and the duration of a block.

    Example:
        with timed_operation(logger, "Electre-TRI pessimistic sorting"):
            SortingFull().pessimistic(problem)
    """
    start = time.time()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    finally:
        logger.log(level, f"Finished: {operation} ({time.time() - start:.3f}s)")


__all__ = [
    'setup_logger',
    'setup_from_config',
    'get_logger',
    'get_module_logger',
    'LoggerFactory',
    'ColoredFormatter',
    'CleanFormatter',
    'strip_ansi',
    'log_execution',
    'timed_operation',
    'LOG_NAME',
]
