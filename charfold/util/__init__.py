# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from .dprint import print_d, print_w, print_e, print_exc
from .misc import cached_func


print_d, print_w, print_e, print_exc, cached_func


def re_escape(string, BAD="/.^$*+-?{,\\[]|()<>#=!:&~"):
    """A re.escape which only escapes what is special in a pattern or
    inside a bracket expression, so non-ASCII text stays readable.
    """

    needs_escape = lambda c: (c in BAD and "\\" + c) or c
    return "".join(map(needs_escape, string))
