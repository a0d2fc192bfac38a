# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import tempfile
from unittest import TestCase as OrigTestCase

try:
    import pytest
except ImportError:
    raise SystemExit("pytest missing: pip install pytest")

pytest


class TestCase(OrigTestCase):
    """Swaps first and second parameters to support our mostly-favoured
    assertion style e.g. `assertEqual(actual, expected)`"""

    def assertEqual(self, first, second, msg=None):
        super().assertEqual(second, first, msg)

    def assertNotEqual(self, first, second, msg=None):
        super().assertNotEqual(second, first, msg)


def mkstemp(*args, **kwargs):
    return tempfile.mkstemp(*args, **kwargs)


def mkdtemp(*args, **kwargs):
    return tempfile.mkdtemp(*args, **kwargs)
