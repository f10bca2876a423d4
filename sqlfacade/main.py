##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Main entry point into sqlfacade's command line interface.
"""

import logging
import sys
import traceback

from sqlfacade.cli.argparse_main import build_main_parser
from sqlfacade.config.configfile import initialize_config, is_debug
from sqlfacade.log_formatter import setup_logging


LOG = logging.getLogger("sqlfacade")


def main():
    """
    Entry point for the sqlfacade command-line interface (CLI) operations.

    This function sets up the argument parser, loads the configuration,
    initializes logging and executes the function bound to the requested
    command. Any exception raised by the command is logged and turned
    into a non-zero exit code.
    """
    parser = build_main_parser()
    if len(sys.argv) == 1:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args()

    config = initialize_config()
    log_level = "DEBUG" if is_debug() else (args.level or config.logging.level)
    setup_logging(logger=LOG, log_level=log_level.upper(), colors=config.logging.colors)

    try:
        args.func(args)
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(1)

    sys.exit()


if __name__ == "__main__":
    main()
