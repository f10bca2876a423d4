##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
sqlfacade: a small query-building facade over SQLite.

This module contains the source code for sqlfacade.
"""

import os


__version__ = "0.4.0"
VERSION = __version__
PATH_TO_PROJ = os.path.join(os.path.dirname(__file__), "")
