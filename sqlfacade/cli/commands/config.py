##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module defines the `ConfigCommand` class, which implements the `config`
command: print the configuration sqlfacade resolved from `app.yaml`, the
defaults and the environment.
"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from sqlfacade.cli.commands.command_entry_point import CommandEntryPoint
from sqlfacade.config import configfile
from sqlfacade.display import display_config


class ConfigCommand(CommandEntryPoint):
    """
    Handles the `config` command.

    Methods:
        add_parser: Adds the `config` command to the CLI parser.
        process_command: Prints the resolved configuration.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `config` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `config` parser will be added.
        """
        parser = subparsers.add_parser(
            "config",
            help="Print the resolved configuration.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument(
            "--config-dir",
            type=str,
            default=None,
            help="Directory to look for app.yaml in instead of the default search locations.",
        )

    def process_command(self, args: Namespace):
        """
        Print the resolved configuration.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        config = configfile.initialize_config(args.config_dir) if args.config_dir else configfile.CONFIG
        if config is None:
            config = configfile.initialize_config()
        display_config(config)
