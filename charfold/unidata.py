# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Sources of Unicode decomposition data.

A source provides four things:

    chars() -> iterable of characters which might have a decomposition
    decomposition(char) -> tuple of str or None
    category(char) -> general category, e.g. "Ll"
    combining(char) -> canonical combining class, 0 for spacing characters

A decomposition is a tuple of single characters, optionally starting with a
formatting tag like "<compat>" or "<font>". Sources raise ValueError for
data they can't parse.
"""

import sys
import unicodedata

from charfold.util import cached_func


def parse_decomposition(value: str) -> tuple[str, ...]:
    """Parses a decomposition field as found in UnicodeData.txt

    "<compat> 0020 0301" -> ("<compat>", " ", "\\u0301")

    Raises ValueError in case a codepoint is not valid hex or out of range.
    """

    parts = []
    for field in value.split():
        if field.startswith("<") and field.endswith(">"):
            parts.append(field)
        else:
            parts.append(chr(int(field, 16)))
    return tuple(parts)


@cached_func
def _decomposed_chars() -> list[str]:
    # the only expensive part, scanning the whole codepoint space
    chars = []
    for i in range(sys.maxunicode + 1):
        c = chr(i)
        if unicodedata.decomposition(c):
            chars.append(c)
    return chars


class UnicodeData:
    """The character database of the running Python"""

    unidata_version = unicodedata.unidata_version

    def chars(self):
        return iter(_decomposed_chars())

    def decomposition(self, char: str) -> tuple[str, ...] | None:
        value = unicodedata.decomposition(char)
        if not value:
            return None
        return parse_decomposition(value)

    def category(self, char: str) -> str:
        return unicodedata.category(char)

    def combining(self, char: str) -> int:
        return unicodedata.combining(char)


class MappingData(UnicodeData):
    """A fixed decomposition table.

    `decompositions` maps characters to either a UnicodeData.txt style
    string or a sequence of elements. Categories and combining classes
    come from the Python database unless given.
    """

    def __init__(self, decompositions, categories=None, combining=None):
        self._decompositions = dict(decompositions)
        self._categories = dict(categories or {})
        self._combining = dict(combining or {})

    def chars(self):
        return iter(self._decompositions)

    def decomposition(self, char):
        value = self._decompositions.get(char)
        if not value:
            return None
        if isinstance(value, str):
            return parse_decomposition(value)
        return tuple(value)

    def category(self, char):
        try:
            return self._categories[char]
        except KeyError:
            return super().category(char)

    def combining(self, char):
        try:
            return self._combining[char]
        except KeyError:
            return super().combining(char)
