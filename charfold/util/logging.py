# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import collections
import threading


class Logs:
    """Thread safe log store"""

    MAX_LOG_SIZE_DEFAULT = 500

    def __init__(self, max_log_size=MAX_LOG_SIZE_DEFAULT):
        self._iter_lock = threading.Lock()
        self._log = collections.deque(maxlen=max_log_size)

    def log(self, string, category=None):
        """Log a str under an optional category.

        Thread safe.
        """

        self._log.append((category, string))

    def clear(self):
        with self._iter_lock:
            self._log.clear()

    def get_content(self, category=None, limit=None):
        """Get a list of strings for the specified category, oldest entry
        first. Passing no category will return all content.
        If `limit` is specified, only the last `limit` items are returned.
        """

        with self._iter_lock:
            entries = list(self._log)

        content = [s for cat, s in entries if category is None or category == cat]
        if limit is not None:
            assert limit > 0
            return content[-limit:]
        return content


_logs = Logs()
log = _logs.log
clear = _logs.clear
get_content = _logs.get_content
