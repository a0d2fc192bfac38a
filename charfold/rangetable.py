# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from bisect import bisect_right
from operator import itemgetter


class RangeTable:
    """An immutable mapping of characters to values.

    Consecutive codepoints with equal values are stored as one range, which
    keeps tables over the mostly empty codepoint space small.

    >>> t = RangeTable({"a": 1, "b": 1, "d": 2})
    >>> list(t.ranges())
    [('a', 'b', 1), ('d', 'd', 2)]
    """

    def __init__(self, items=()):
        """items is a mapping or an iterable of (char, value) pairs.

        Raises ValueError for keys which are not single characters or
        appear twice.
        """

        if hasattr(items, "items"):
            items = items.items()

        pairs = []
        for char, value in items:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError("not a character: %r" % (char,))
            pairs.append((ord(char), value))
        pairs.sort(key=itemgetter(0))

        self._starts: list[int] = []
        self._ends: list[int] = []
        self._values: list = []

        for cp, value in pairs:
            if self._ends and cp <= self._ends[-1]:
                raise ValueError("duplicate key: %r" % chr(cp))
            if self._ends and cp == self._ends[-1] + 1 and \
                    self._values[-1] == value:
                self._ends[-1] = cp
            else:
                self._starts.append(cp)
                self._ends.append(cp)
                self._values.append(value)

    def _find(self, char):
        if not isinstance(char, str) or len(char) != 1:
            return None
        cp = ord(char)
        index = bisect_right(self._starts, cp) - 1
        if index >= 0 and cp <= self._ends[index]:
            return index
        return None

    def get(self, char, default=None):
        index = self._find(char)
        if index is None:
            return default
        return self._values[index]

    def __getitem__(self, char):
        index = self._find(char)
        if index is None:
            raise KeyError(char)
        return self._values[index]

    def __contains__(self, char):
        return self._find(char) is not None

    def __len__(self):
        return sum(e - s + 1 for s, e in zip(self._starts, self._ends))

    def __iter__(self):
        for start, end in zip(self._starts, self._ends):
            for cp in range(start, end + 1):
                yield chr(cp)

    def items(self):
        for start, end, value in zip(self._starts, self._ends, self._values):
            for cp in range(start, end + 1):
                yield chr(cp), value

    def ranges(self):
        """Yields (first char, last char, value) for each stored range"""

        for start, end, value in zip(self._starts, self._ends, self._values):
            yield chr(start), chr(end), value

    def __eq__(self, other):
        if not isinstance(other, RangeTable):
            return NotImplemented
        return (self._starts == other._starts and
                self._ends == other._ends and
                self._values == other._values)

    __hash__ = None

    def __repr__(self):
        return "<%s ranges=%d chars=%d>" % (
            type(self).__name__, len(self._starts), len(self))
