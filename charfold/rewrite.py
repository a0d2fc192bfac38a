# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import re

from charfold.util import re_escape


class DecompositionRewriter:
    """Replaces decomposed sequences in a search string by their base, so
    only single characters need to be looked up afterwards.

    >>> DecompositionRewriter({"e\\u0301": "e"})("cafe\\u0301")
    'cafe'

    Replacement is literal, case-sensitive and goes left to right without
    overlaps. At each position the longest member wins.
    """

    def __init__(self, mapping):
        self._mapping = dict(mapping)

        # longest matches first
        keys = sorted(self._mapping, key=lambda k: (-len(k), k))
        if keys:
            self._regexp = re.compile("|".join(map(re_escape, keys)))
        else:
            self._regexp = None

    def __bool__(self):
        return self._regexp is not None

    def _replace(self, match):
        return self._mapping[match.group(0)]

    def __call__(self, text: str) -> str:
        if self._regexp is None:
            return text
        return self._regexp.sub(self._replace, text)
