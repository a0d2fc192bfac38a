# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""
Groups characters into equivalence classes using their decomposition.

Each class is keyed by a base character, the first letter or number of the
decomposition, and lists the characters folding to it:

    classify(UnicodeData())["e"] =>
        ["è", "e\\u0300", "é", "e\\u0301", "ê", "e\\u0302", ...]

Besides the character itself the whole decomposition string gets added when
it is the base combined with diacritic marks, so a decomposed "e\\u0301" in
a text is found as well. Decompositions holding several letters, like
ligatures or "½", only fold the character.
"""

from charfold.util import print_d


LETTER_CATEGORIES = frozenset(["Lu", "Ll", "Lt", "Lm", "Lo", "Nd", "Nl", "No"])


def _is_tag(element):
    return len(element) != 1


def add_member(members: list[str], base: str, member: str) -> None:
    """Appends member to the class of base, skipping duplicates and the
    base itself.
    """

    if member != base and member not in members:
        members.append(member)


def classify_char(source, char: str) -> tuple[str, bool, str] | None:
    """Returns (anchor, fold_whole, decomposition string) for a character,
    or None if it doesn't fold to anything.

    Raises ValueError for malformed decomposition data.
    """

    dec = source.decomposition(char)
    if not dec:
        return None

    # discard the formatting tag
    if _is_tag(dec[0]):
        dec = dec[1:]

    if not dec or dec == (char,):
        return None

    if any(_is_tag(e) for e in dec):
        raise ValueError("invalid decomposition for %r: %r" % (char, dec))

    def is_letter(c):
        return source.category(c) in LETTER_CATEGORIES

    for index, element in enumerate(dec):
        if is_letter(element):
            break
    else:
        index = 0
    anchor = dec[index]

    fold_whole = True
    # more letters/numbers following: e.g. "ǆ" or "ﬃ" are not "d" or "f"
    if len([e for e in dec[index + 1:] if is_letter(e)]) > 1:
        fold_whole = False

    # only fold base + diacritics, not spacing sequences
    if fold_whole and not any(source.combining(e) > 0 for e in dec):
        fold_whole = False

    return anchor, fold_whole, "".join(dec)


def classify(source) -> dict[str, list[str]]:
    """Returns a dict mapping a base character to the list of strings
    which should match when searching for it.
    """

    equiv: dict[str, list[str]] = {}
    skipped = 0

    for char in source.chars():
        try:
            result = classify_char(source, char)
        except ValueError:
            skipped += 1
            continue

        if result is None:
            continue

        anchor, fold_whole, whole = result
        if anchor == char:
            continue

        members = equiv.setdefault(anchor, [])
        add_member(members, anchor, char)
        if fold_whole:
            add_member(members, anchor, whole)

    print_d("%d classes, %d characters with invalid data" % (
        len(equiv), skipped))

    return equiv
