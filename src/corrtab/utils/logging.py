"""
corrtab Logging System
======================
Provides consistent, scoped loggers for the package.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

# Console lines carry the logger name (e.g. [corrtab.render.table])
CONSOLE_FMT = "[%(name)s] %(levelname)s: %(message)s"

# File format keeps timestamps
FILE_FMT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

_KNOWN_LOGGERS: List[logging.Logger] = []
_SHARED_FILE_HANDLER: Optional[logging.FileHandler] = None
_CONSOLE_LEVEL = logging.WARNING


def _is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


def get_logger(name: str) -> logging.Logger:
    """
    Creates or retrieves a logger with corrtab formatting and handlers.

    All loggers created through this function share the file handler
    installed by `setup_file_logging`, and follow `set_console_level`.

    Args:
        name: Dot-separated module name (e.g., 'corrtab.render.table').
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # handlers filter it down
    logger.propagate = False

    if logger not in _KNOWN_LOGGERS:
        _KNOWN_LOGGERS.append(logger)

    if not any(_is_console_handler(h) for h in logger.handlers):
        c_handler = logging.StreamHandler(sys.stderr)
        c_handler.setLevel(_CONSOLE_LEVEL)
        c_handler.setFormatter(logging.Formatter(CONSOLE_FMT))
        logger.addHandler(c_handler)

    if _SHARED_FILE_HANDLER and _SHARED_FILE_HANDLER not in logger.handlers:
        logger.addHandler(_SHARED_FILE_HANDLER)

    return logger


def set_console_level(level: int):
    """
    Changes the console level of every corrtab logger, present and future.

    Args:
        level: A `logging` level such as `logging.DEBUG`.
    """
    global _CONSOLE_LEVEL

    _CONSOLE_LEVEL = level
    for l in _KNOWN_LOGGERS:
        for h in l.handlers:
            if _is_console_handler(h):
                h.setLevel(level)


def setup_file_logging(log_dir: Path, file_level: int = logging.DEBUG) -> Path:
    """
    Initializes the shared file logger for the whole package.
    Call once at the start of a script.

    Args:
        log_dir: The directory where the log file will be created.
        file_level: The logging level for the file.

    Returns:
        Path of the log file.
    """
    global _SHARED_FILE_HANDLER

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "corrtab.log"

    new_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    new_handler.setLevel(file_level)
    new_handler.setFormatter(logging.Formatter(FILE_FMT))

    if _SHARED_FILE_HANDLER:
        _SHARED_FILE_HANDLER.close()

    _SHARED_FILE_HANDLER = new_handler

    for l in _KNOWN_LOGGERS:
        old_handlers = [h for h in l.handlers if isinstance(h, logging.FileHandler)]
        for h in old_handlers:
            l.removeHandler(h)
        l.addHandler(new_handler)

    get_logger("corrtab").info(f"File logging initialized at: {log_file}")
    return log_file
