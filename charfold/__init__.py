# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""
Lets characters match the characters and sequences equivalent to them,
like "e" matching "é", "ê" and a decomposed "e\\u0301".

fold = CharFold()
fold.compile("Cafe")("Café au lait")  => match

By default only searching the base character finds its variants. With
`fold.symmetric = True` searching any variant finds the others as well.
"""

from .util.dprint import print_d, print_e, print_w
from .fold import CharFold, FoldState, build


print_d, print_e, print_w, CharFold, FoldState, build
