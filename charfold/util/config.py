# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Simple proxy to a Python ConfigParser

Text is saved as is, the file on disk is utf-8.
"""

import collections
import csv
import os
from configparser import Error, NoSectionError
from configparser import RawConfigParser as ConfigParser
from io import StringIO
from typing import Any, cast

from charfold.util import print_d, print_w
from charfold.util.atomic import atomic_save


Error


# In newer RawConfigParser it is possible to replace the internal dict. The
# implementation only uses items() for writing, so replace with a dict that
# returns them sorted. This makes it easier to look up entries in the file.
class _sorted_dict(collections.OrderedDict):  # noqa
    def items(self):
        return sorted(super().items())


class _Default:
    pass


_DEFAULT: _Default = _Default()


class Config:
    """A wrapper around RawConfigParser.

    Provides a ``defaults`` attribute of the same type which can be used
    to set default values.
    """

    def __init__(self, _defaults: bool = True):
        """Use read() to read in an existing config file."""

        self._config = ConfigParser(dict_type=_sorted_dict)
        self.defaults = None
        if _defaults:
            self.defaults = Config(_defaults=False)

    def get(self, section: str, option: str,
            default: str | _Default = _DEFAULT) -> str:
        """If default is not given or set, raises Error in case of an error"""

        try:
            return self._config.get(section, option)
        except Error as e:
            if default is _DEFAULT:
                if self.defaults is not None:
                    try:
                        return self.defaults.get(section, option)
                    except Error:
                        pass
                raise
            if "No section:" in str(e):
                print_w(f"Config problem: {e}")
            return cast(str, default)

    def getboolean(self, section: str, option: str,
                   default: bool | _Default = _DEFAULT) -> bool:
        """If default is not given or set, raises Error in case of an error"""

        try:
            return self._config.getboolean(section, option)
        except (Error, ValueError) as e:
            if default is _DEFAULT:
                if self.defaults is not None:
                    try:
                        return self.defaults.getboolean(section, option)
                    except Error:
                        pass
                raise Error(str(e)) from e
            return cast(bool, default)

    def getstringlist(self, section: str, option: str,
                      default: list[str] | _Default = _DEFAULT) -> list[str]:
        """
        If default is not given or set, raises Error in case of an error.
        Gets a list of strings, using CSV to parse and delimit.
        """

        try:
            value = self._config.get(section, option)

            parser = csv.reader(
                [value], lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
            try:
                return next(parser, [])
            except (csv.Error, ValueError) as e:
                raise Error(str(e)) from e
        except Error as e:
            if default is _DEFAULT:
                if self.defaults is not None:
                    try:
                        return self.defaults.getstringlist(section, option)
                    except Error:
                        pass
                raise Error(str(e)) from e
            return cast(list[str], default)

    def setstringlist(self, section: str, option: str,
                      values: list[str]) -> None:
        """Saves a list of strings using the csv module"""

        sw = StringIO()
        values = [str(v) for v in values]

        writer = csv.writer(
            sw, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
        writer.writerow(values)
        self.set(section, option, sw.getvalue().rstrip("\n"))

    def set(self, section: str, option: str, value: Any) -> None:
        """Saves the string representation for the passed value"""

        if isinstance(value, bytes):
            raise TypeError("only text is supported")

        # RawConfigParser only allows string values but doesn't
        # scream if they are not (and it only fails before the
        # first config save...)
        if isinstance(value, bool):
            value = str(value).lower()
        elif not isinstance(value, str):
            value = str(value)

        try:
            self._config.set(section, option, value)
        except NoSectionError:
            if self.defaults and self.defaults.has_section(section):
                self._config.add_section(section)
                self._config.set(section, option, value)
            else:
                raise

    def write(self, filename: str) -> None:
        """Write config to filename.

        :raises OSError: When writing the file fails.
        """

        dirname = os.path.dirname(filename)
        if dirname:
            os.makedirs(dirname, exist_ok=True)

        with atomic_save(filename, "wb") as fileobj:
            temp = StringIO()
            self._config.write(temp)
            fileobj.write(temp.getvalue().encode("utf-8"))

    def clear(self) -> None:
        """Remove all sections."""

        for section in self._config.sections():
            self._config.remove_section(section)

    def is_empty(self) -> bool:
        """Whether the config has any sections"""

        return not self._config.sections()

    def read(self, filename: str) -> None:
        """Reads the config from `filename` if the file exists,
        otherwise does nothing

        Can raise Error.
        """

        try:
            with open(filename, "rb") as fileobj:
                io = StringIO(fileobj.read().decode("utf-8"))
        except OSError:
            print_d(f"No config file found at {filename}, using defaults")
            return
        except UnicodeDecodeError as e:
            raise Error(str(e)) from e

        self._config.read_file(io, filename)

    def has_section(self, section: str) -> bool:
        """If the given section exists"""

        return self._config.has_section(section) or (
            self.defaults is not None and self.defaults.has_section(section))

    def add_section(self, section: str) -> None:
        """Add a section to the instance if it doesn't already exist."""

        if not self._config.has_section(section):
            self._config.add_section(section)
