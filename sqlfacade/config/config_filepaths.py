##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module stores constants representing file paths that will be needed for
sqlfacade's configuration.
"""

import os


APP_FILENAME: str = "app.yaml"
USER_HOME: str = os.path.expanduser("~")
SQLFACADE_HOME: str = os.path.join(USER_HOME, ".sqlfacade")
