"""
Dual-sink logging for warsector.

Logs to stdout AND a log file.
"""

import sys
import logging
from pathlib import Path
from typing import Optional


# Fallback log file locations (in order of preference)
LOG_FILE_PATHS = [
    "/tmp/warsector.log",
]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _first_writable(paths) -> Optional[str]:
    for path in paths:
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'a'):
                pass
            return path
        except (PermissionError, OSError):
            continue
    return None


def setup_logging(verbose: bool = False,
                  log_file: Optional[str] = None,
                  log_format: str = LOG_FORMAT) -> logging.Logger:
    """
    Setup console + file logging.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise INFO.
        log_file: Log file path. If None, the first writable path in
            LOG_FILE_PATHS is used; if none is writable, console only.
        log_format: Format string shared by both sinks.

    Returns:
        The "warsector" package logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    file_path = log_file or _first_writable(LOG_FILE_PATHS)
    if file_path:
        try:
            file_handler = logging.FileHandler(file_path, mode='a')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not setup file logging at {file_path}: {e}",
                  file=sys.stderr)

    logging.basicConfig(level=level, format=log_format, handlers=handlers)

    logger = logging.getLogger("warsector")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)
