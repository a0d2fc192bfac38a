# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Helpers for atomic file operations"""

import contextlib
import os
import tempfile


@contextlib.contextmanager
def atomic_save(filename, mode):
    """Try to replace the content of a file in the safest way possible.

    A temporary file will be created in the same directory where the
    replacement data can be written into. After writing is done the data
    will be flushed to disk and the original file replaced atomically.

    In case of an error this raises OSError and the original file
    will be untouched.

    with atomic_save("charfold.cfg", "wb") as f:
        f.write(data)
    """

    dir_ = os.path.dirname(filename) or "."
    basename = os.path.basename(filename)
    fileobj = tempfile.NamedTemporaryFile(
        mode=mode, dir=dir_, prefix=basename + "_", suffix=".tmp",
        delete=False)

    try:
        yield fileobj

        fileobj.flush()
        os.fsync(fileobj.fileno())
        fileobj.close()
        os.replace(fileobj.name, filename)
    except BaseException:
        fileobj.close()
        try:
            os.unlink(fileobj.name)
        except OSError:
            pass
        raise
