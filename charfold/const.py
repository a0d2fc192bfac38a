# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Constants used in various parts of charfold."""

import os
import sys


VERSION_TUPLE = (0, 3, 0)
VERSION = ".".join(map(str, VERSION_TUPLE))

# debug messages are only printed if set
DEBUG = ("--debug" in sys.argv or "CHARFOLD_DEBUG" in os.environ)
