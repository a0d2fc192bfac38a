# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import re
import threading
import time
from typing import NamedTuple

from charfold import config
from charfold.util import print_d, re_escape

from .classify import classify
from .overrides import apply_overrides, apply_include, apply_exclude
from .pattern import compile_table
from .rangetable import RangeTable
from .rewrite import DecompositionRewriter
from .symmetric import expand
from .unidata import UnicodeData


class FoldState(NamedTuple):
    """Everything derived from one mode, replaced as a whole on rebuild"""

    symmetric: bool
    equivalences: dict[str, list[str]]
    table: RangeTable
    mapping: dict[str, str]
    rewriter: DecompositionRewriter


def build(symmetric=False, source=None, include=(), exclude=()) -> FoldState:
    """Computes the equivalence classes, the decomposition mapping and the
    pattern table from scratch.
    """

    if source is None:
        source = UnicodeData()

    start = time.time()

    equiv = classify(source)
    equiv = apply_overrides(equiv)
    equiv = apply_include(equiv, include)
    equiv = apply_exclude(equiv, exclude)

    mapping: dict[str, str] = {}
    if symmetric:
        equiv, mapping = expand(equiv)

    table = compile_table(equiv)

    print_d("Built %s table: %d classes, %d rewrites (%.3f s)" % (
        "symmetric" if symmetric else "asymmetric", len(equiv), len(mapping),
        time.time() - start))

    return FoldState(bool(symmetric), equiv, table, mapping,
                     DecompositionRewriter(mapping))


class CharFold:
    """Owns the current fold table and rebuilds it when the mode changes.

    fold = CharFold()
    fold.compile_search_pattern("e") => "(?:e[\\u0300\\u0301...]?|[èéêë...])"
    fold.symmetric = True  # rebuilds before returning
    """

    def __init__(self, symmetric=False, source=None, include=(), exclude=()):
        self._lock = threading.Lock()
        self._source = source if source is not None else UnicodeData()
        self._include = list(include)
        self._exclude = list(exclude)
        self._bound = False
        self._state = build(symmetric, self._source, self._include,
                            self._exclude)

    @classmethod
    def from_config(cls, source=None):
        """Creates an instance using the options in the [fold] section and
        writes changes back to them.
        """

        fold = cls(
            symmetric=config.getboolean("fold", "symmetric"),
            source=source,
            include=config.getstringlist("fold", "include"),
            exclude=config.getstringlist("fold", "exclude"))
        fold._bound = True
        return fold

    def _rebuild(self, symmetric):
        with self._lock:
            state = build(symmetric, self._source, self._include,
                          self._exclude)
            # readers get either the old or the new state, never a mix
            self._state = state
        return state

    @property
    def state(self) -> FoldState:
        return self._state

    @property
    def table(self) -> RangeTable:
        return self._state.table

    @property
    def mapping(self) -> dict[str, str]:
        return self._state.mapping

    @property
    def equivalences(self) -> dict[str, list[str]]:
        return self._state.equivalences

    @property
    def symmetric(self) -> bool:
        return self._state.symmetric

    @symmetric.setter
    def symmetric(self, value):
        value = bool(value)
        if value != self._state.symmetric:
            self._rebuild(value)
        if self._bound:
            config.set("fold", "symmetric", value)

    def set_lists(self, include=(), exclude=()):
        """Replaces the user include/exclude entries and rebuilds"""

        self._include = list(include)
        self._exclude = list(exclude)
        self._rebuild(self._state.symmetric)
        if self._bound:
            config.setstringlist("fold", "include", self._include)
            config.setstringlist("fold", "exclude", self._exclude)

    def rebuild(self) -> RangeTable:
        """Recomputes everything for the current mode"""

        return self._rebuild(self._state.symmetric).table

    def compile_search_pattern(self, raw: str) -> str:
        """Returns a regular expression matching raw and everything
        equivalent to it. raw is taken literally.
        """

        state = self._state
        text = state.rewriter(raw)
        table = state.table
        return "".join(table.get(c) or re_escape(c) for c in text)

    def compile(self, raw, ignore_case=False):
        """
        Args:
            raw (str): the text to search for, taken literally
            ignore_case (bool): if case should be ignored when matching
        Returns:
            A callable which will return a match object if an equivalent
            of raw is contained in the passed text.
        Raises:
            ValueError: In case the resulting regex is invalid
        """

        pattern = self.compile_search_pattern(raw)

        mods = re.MULTILINE | re.UNICODE
        if ignore_case:
            mods |= re.IGNORECASE

        try:
            reg = re.compile(pattern, mods)
        except re.error as e:
            raise ValueError(e) from e

        return reg.search
