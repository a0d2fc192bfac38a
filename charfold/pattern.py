# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""
Compiles equivalence classes into regular expressions.

regexp_opt(["e", "é", "ê", "e\\u0301"]) => "(?:e\\u0301?|[éê])"

Strings sharing a prefix share it in the pattern and characters ending an
alternative are merged into one bracket expression. Where one alternative is
the prefix of another the rest is a greedy optional group, so the longer one
matches whenever it is present.
"""

from charfold.util import re_escape

from .rangetable import RangeTable


# marks the end of a string in the trie, never a valid character
_END = ""


def _build_trie(strings):
    trie: dict = {}
    for string in strings:
        node = trie
        for char in string:
            node = node.setdefault(char, {})
        node[_END] = {}
    return trie


def _trie_to_regexp(node):
    optional = _END in node

    singles = []
    multis = []
    for char in sorted(k for k in node if k != _END):
        child = node[char]
        if list(child) == [_END]:
            singles.append(char)
        else:
            multis.append(re_escape(char) + _trie_to_regexp(child))

    if len(singles) == 1:
        atoms = [re_escape(singles[0])]
    elif singles:
        atoms = ["[%s]" % "".join(map(re_escape, singles))]
    else:
        atoms = []

    alternatives = multis + atoms
    if not alternatives:
        return ""

    if len(alternatives) == 1 and (not optional or atoms):
        # a single character or bracket expression takes "?" directly
        pattern = alternatives[0]
    else:
        pattern = "(?:%s)" % "|".join(alternatives)

    if optional:
        pattern += "?"
    return pattern


def regexp_opt(strings) -> str:
    """Returns a regular expression matching any of the passed strings"""

    strings = [s for s in strings if s]
    if not strings:
        return ""
    return _trie_to_regexp(_build_trie(strings))


def compile_table(equiv) -> RangeTable:
    """Returns a table mapping each class key to a pattern matching the key
    itself and all of its members.
    """

    return RangeTable(
        (key, regexp_opt([key] + members))
        for key, members in equiv.items() if members)
