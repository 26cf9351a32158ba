from .logging import get_logger, set_console_level, setup_file_logging

__all__ = [
    "get_logger",
    "set_console_level",
    "setup_file_logging",
]
