# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""
Symmetric folding: every single character member of a class also finds its
base and its siblings.

    {"e": ["é", "e\\u0301", "ê"]} =>
        {"e": ["é", "e\\u0301", "ê"],
         "é": ["e", "e\\u0301", "ê"],
         "ê": ["e", "é", "e\\u0301"]}

Equivalence is relative to the base: members of one class only get the
members of that class, there is no transitive closure over classes sharing
a member.
"""

from .classify import add_member


def collect_reverse(equiv):
    """Returns a list of (key, extra members) pairs and the mapping of
    every multi-codepoint member to the string of its base.

    Single characters are not mapped, they have their own class after
    merging and a character can be a member of several classes.
    """

    reverse: list[tuple[str, list[str]]] = []
    mapping: dict[str, str] = {}

    for base, members in equiv.items():
        for member in members:
            if len(member) == 1:
                siblings = [m for m in members if m != member]
                reverse.append((member, [base] + siblings))
            else:
                mapping[member] = base

    return reverse, mapping


def merge_reverse(equiv, reverse):
    """Returns a new dict with the reverse entries appended after the
    existing members.
    """

    merged = {base: list(members) for base, members in equiv.items()}
    for key, extra in reverse:
        members = merged.setdefault(key, [])
        for member in extra:
            add_member(members, key, member)
    return merged


def expand(equiv):
    """Returns the symmetric version of equiv and the mapping of class
    members to their base, leaving equiv untouched.
    """

    reverse, mapping = collect_reverse(equiv)
    return merge_reverse(equiv, reverse), mapping
