# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Equivalences which don't follow from decomposition.

Unicode doesn't relate ASCII quotes to their typographic counterparts, so
these get added by hand. Users can add and remove more through the
"include" and "exclude" options.
"""

from charfold.util import print_w

from .classify import add_member


# base, variants. Applied in order, variants go in front of the existing
# class members.
MANUAL_OVERRIDES = [
    ('"', ["＂", "“", "”", "„", "⹂", "〞",
           "‟", "❞", "❝", "❠", "〝", "〟",
           "\U0001f677", "\U0001f676", "\U0001f678", "\xab", "\xbb"]),
    ("'", ["❟", "❛", "❜", "‘", "’", "‚",
           "‛", "❮", "❯", "‹", "›"]),
    ("`", ["❛", "‘", "‛", "❮", "‹"]),
]


def apply_overrides(equiv, overrides=MANUAL_OVERRIDES):
    """Returns a new dict with the override variants prepended to the
    classes of their base.

    A base listed more than once doesn't replace its earlier entry, the
    later variants are prepended in front of the earlier ones.
    """

    equiv = dict(equiv)
    for base, variants in overrides:
        members: list[str] = []
        for variant in list(variants) + equiv.get(base, []):
            add_member(members, base, variant)
        if members:
            equiv[base] = members
    return equiv


def parse_entry(entry: str) -> tuple[str, list[str]]:
    """Parses an include/exclude entry

    "a ä à" -> ("a", ["ä", "à"])

    Raises ValueError if the entry is empty or the base isn't a single
    character.
    """

    parts = entry.split()
    if not parts:
        raise ValueError("empty entry")
    base, variants = parts[0], parts[1:]
    if len(base) != 1:
        raise ValueError("base has to be a single character: %r" % base)
    return base, variants


def apply_include(equiv, entries):
    """Returns a new dict with the variants of each entry appended to the
    class of its base.
    """

    equiv = dict(equiv)
    for entry in entries:
        try:
            base, variants = parse_entry(entry)
        except ValueError as e:
            print_w("Skipping include entry %r: %s" % (entry, e))
            continue

        members = list(equiv.get(base, []))
        for variant in variants:
            add_member(members, base, variant)
        if members:
            equiv[base] = members
    return equiv


def apply_exclude(equiv, entries):
    """Returns a new dict without the variants listed in entries.

    An entry with only a base removes the whole class.
    """

    equiv = dict(equiv)
    for entry in entries:
        try:
            base, variants = parse_entry(entry)
        except ValueError as e:
            print_w("Skipping exclude entry %r: %s" % (entry, e))
            continue

        if base not in equiv:
            continue

        members = [m for m in equiv[base] if variants and m not in variants]
        if members:
            equiv[base] = members
        else:
            del equiv[base]
    return equiv
