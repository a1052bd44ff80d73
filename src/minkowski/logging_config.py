"""
Logging setup for scripts and demos.

Library modules only create module loggers (`logging.getLogger(__name__)`)
under the `minkowski` namespace; attaching handlers is left to the caller.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "minkowski"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
TIME_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Send engine log records to stdout and, optionally, a file.

    Calling it again replaces the previous handlers, so a demo or notebook
    can re-run it without printing every record twice.

    Args:
        level: Threshold for the package logger and its handlers
        log_file: Path of a log file to (over)write alongside stdout

    Returns:
        The `minkowski` package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(Path(log_file), mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=TIME_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}")
    return package_logger
