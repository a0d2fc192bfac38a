# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import shutil

from charfold.util.config import Config, Error
from charfold.util import print_d, print_w


# this defines the initial and default values
INITIAL = {
    "fold": {
        # if any member of an equivalence class should find all the others,
        # not just the base character finding its variants
        "symmetric": "false",

        # extra equivalences, csv list of "<base> <variant> <variant>..."
        "include": "",

        # equivalences to drop, same format. A lone base drops its class
        "exclude": "",
    },
}

# global instance
_config = Config()

getboolean = _config.getboolean
getstringlist = _config.getstringlist
setstringlist = _config.setstringlist
set = _config.set

_filename = None


def init_defaults():
    """Fills in the default values, can be called multiple times"""

    _config.defaults.clear()
    for section, values in INITIAL.items():
        _config.defaults.add_section(section)
        for key, value in values.items():
            _config.defaults.set(section, key, value)


init_defaults()


def init(filename=None):
    global _filename

    if not _config.is_empty():
        _config.clear()

    _filename = filename

    if filename is not None:
        try:
            _config.read(filename)
        except Error:
            print_w("Reading config file %r failed." % filename)

            # move the broken file out of the way
            try:
                shutil.copy(filename, filename + ".not-valid")
            except OSError:
                pass
            _config.clear()


def save(filename=None):
    """Writes the active config to filename, ignoring all possible errors.

    If no filename is given the one used for loading is used.
    """

    if filename is None:
        filename = _filename
        if filename is None:
            return

    print_d("Writing config...")
    try:
        _config.write(filename)
    except OSError:
        print_w("Unable to write config.")


def quit():
    """Drops all non-default values"""

    _config.clear()
