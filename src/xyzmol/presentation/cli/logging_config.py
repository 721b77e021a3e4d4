"""Logging setup shared by the command-line tools."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the root logger for a command-line run.

    Args:
        verbose: Log DEBUG messages
        quiet: Only log errors
        log_file: Also write log records to this file

    Returns:
        The configured root logger
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if verbose:
        root_logger.setLevel(logging.DEBUG)
    elif quiet:
        root_logger.setLevel(logging.ERROR)
    else:
        root_logger.setLevel(logging.WARNING)
    return root_logger


def add_logging_arguments(parser) -> None:
    """Add --verbose, --quiet and --log-file options to an argument parser."""
    parser.add_argument(
        "--verbose", action="store_true", help="Show detailed processing information"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress non-essential output"
    )
    parser.add_argument("--log-file", default=None, help="Write log messages to file")
