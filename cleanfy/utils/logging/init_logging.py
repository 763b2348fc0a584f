"""Module: init_logging.py

Author: Michael Economou
Date: 2026-09-14

Provides a single entry point to initialize the logging system
for the command-line tool.
Functions:
init_logging(app_name, verbose, log_dir): Sets up the console handler and,
    when a log directory is given, rotating activity and error files.
"""

import logging
import os
import sys

from cleanfy.config import APP_NAME, LOG_CONSOLE_FORMAT, LOG_CONSOLE_LEVEL
from cleanfy.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from cleanfy.utils.logging.logger_file_helper import add_file_handler

# Marks handlers owned by init_logging so a second call replaces them
_OWNED_ATTR = "_cleanfy_owned"


def init_logging(
    app_name: str = APP_NAME,
    verbose: bool = False,
    log_dir: str | None = None,
) -> logging.Logger:
    """Initializes logging for the application.

    Console output goes to stderr so that JSON written to stdout stays
    machine-readable.

    Args:
        app_name (str): The base name for log files and the root package logger.
        verbose (bool): Log DEBUG records to the console instead of the default level.
        log_dir (str, optional): Directory for rotating activity/error log files.

    Returns:
        logging.Logger: The package logger.

    """
    logger = get_cached_logger(app_name)
    logger.setLevel(logging.DEBUG)
    _remove_owned_handlers(logger)

    console_level = logging.DEBUG if verbose else logging.getLevelName(LOG_CONSOLE_LEVEL)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
    _own(console_handler)
    logger.addHandler(console_handler)

    if log_dir:
        _own(add_file_handler(logger, os.path.join(log_dir, f"{app_name}_activity.log"), level=logging.INFO))
        _own(add_file_handler(logger, os.path.join(log_dir, f"{app_name}_errors.log"), level=logging.ERROR))

    if verbose:
        LoggerFactory.set_global_level(logging.DEBUG)

    return logger


def _own(handler: logging.Handler) -> None:
    setattr(handler, _OWNED_ATTR, True)


def _remove_owned_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()
