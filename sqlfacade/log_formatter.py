##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Console logging for the `sqlfacade` command line tool.

The library modules only create loggers; handlers are attached here, once,
by the CLI entry point. Library users configure logging however they like.
"""

import logging
import sys

import coloredlogs


FORMATS = {
    "DEFAULT": "[%(asctime)s: %(levelname)s] %(message)s",
    "DEBUG": "[%(asctime)s: %(levelname)s] [%(module)s: %(lineno)d] %(message)s",
}

CONSOLE_HANDLER_NAME = "sqlfacade-console"


def get_log_format(log_level: str) -> str:
    """
    Pick the message format for a log level. Debug output also shows where
    each message came from, which helps when following the SQL a command ran.

    Args:
        log_level: The name of the log level, e.g. `"DEBUG"`.

    Returns:
        A `logging` format string.
    """
    return FORMATS["DEBUG"] if log_level == "DEBUG" else FORMATS["DEFAULT"]


def setup_logging(logger: logging.Logger, log_level: str = "INFO", colors: bool = True):
    """
    Send `logger`'s records to stdout at `log_level`.

    Calling this again replaces the console handler added by the previous call
    instead of stacking a second one, so messages are never printed twice.

    Args:
        logger: The logger to configure, normally the `sqlfacade` logger.
        log_level: Name of the lowest level to show.
        colors: Whether to color the output with `coloredlogs`.
    """
    fmt = get_log_format(log_level)

    for handler in list(logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.set_name(CONSOLE_HANDLER_NAME)
    console.setFormatter(logging.Formatter(fmt))
    logger.addHandler(console)

    logger.setLevel(log_level)
    logger.propagate = False

    if colors:
        coloredlogs.install(level=log_level, logger=logger, fmt=fmt)
