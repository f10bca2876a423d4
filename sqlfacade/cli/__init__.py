##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
The command line interface for sqlfacade.

Modules:
    argparse_main: Builds the main `ArgumentParser` with every command registered.
    utils: Helpers shared by the commands.
    commands: One module per CLI command.
"""
