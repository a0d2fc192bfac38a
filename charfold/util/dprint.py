# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import errno
import logging
import os
import re
import sys
import time
import traceback

from senf import print_, supports_ansi_escape_codes

from charfold import const
from . import logging as cf_logging


class Color:

    NO_COLOR = "\033[0m"
    MAGENTA = "\033[95m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    RED = "\033[91m"


class Colorise:

    @classmethod
    def __reset(cls, text):
        return text + Color.NO_COLOR

    @classmethod
    def magenta(cls, text):
        return cls.__reset(Color.MAGENTA + text)

    @classmethod
    def blue(cls, text):
        return cls.__reset(Color.BLUE + text)

    @classmethod
    def yellow(cls, text):
        return cls.__reset(Color.YELLOW + text)

    @classmethod
    def green(cls, text):
        return cls.__reset(Color.GREEN + text)

    @classmethod
    def red(cls, text):
        return cls.__reset(Color.RED + text)


_ANSI_ESC_RE = re.compile("(\x1b\\[\\d\\d?m)")


def strip_color(text):
    """Strip ansi escape codes from the passed text"""

    return _ANSI_ESC_RE.sub("", text)


def frame_info(level=0):
    """Return a short string describing the current stack frame which can
    be used for debug messages.

    level defines which frame should be used. 0 means the caller, 1 the caller
    of the caller etc.
    """

    frame = sys._getframe()
    for i in range(level + 1):
        if frame.f_back is None:
            break
        frame = frame.f_back

    f_code = frame.f_code
    co_name = f_code.co_name
    co_varnames = f_code.co_varnames

    info = ""
    # a method: the first argument is the instance or the class
    if co_varnames and co_varnames[0] in frame.f_locals:
        cls = frame.f_locals[co_varnames[0]]
        if not hasattr(cls, "__name__"):
            cls = cls.__class__
        if hasattr(cls, co_name):
            info = cls.__name__

    if not info:
        info = str(frame.f_globals.get("__name__", ""))

    if info:
        info += "." + co_name

    return info


def _should_write_to_file(file_):
    if file_ is None:
        return False

    try:
        return file_.fileno() >= 0
    except (OSError, AttributeError, ValueError):
        # StringIO and friends
        return True


def _supports_ansi_escape_codes(file_):
    try:
        return supports_ansi_escape_codes(file_.fileno())
    except (OSError, AttributeError, ValueError):
        return False


def _print_message(string, custom_context, debug_only, prefix,
                   color, logging_category, start_time=time.time()):

    if not isinstance(string, str):
        string = str(string)

    context = frame_info(2)

    # strip the package name
    if context.count(".") > 1:
        context = context.split(".", 1)[-1]

    if custom_context:
        context = "%s(%r)" % (context, custom_context)

    timestr = ("%08.3f" % (time.time() - start_time))[-9:]

    info = "%s: [%s] %s:" % (
        getattr(Colorise, color)(prefix),
        Colorise.magenta(timestr),
        Colorise.blue(context))

    lines = string.splitlines() or [""]
    if len(lines) > 1:
        string = os.linesep.join([info] + [" " * 4 + l for l in lines])
    else:
        string = info + " " + lines[0]

    if not debug_only or const.DEBUG:
        file_ = sys.stderr
        if _should_write_to_file(file_):
            if not _supports_ansi_escape_codes(file_):
                string = strip_color(string)
            try:
                print_(string, file=file_, flush=True)
            except OSError as e:
                # the terminal went away, nothing left to report to
                if e.errno != errno.EIO:
                    raise

    cf_logging.log(strip_color(string), logging_category)


def format_exception(etype, value, tb, limit=None):
    """Returns a list of str"""

    return traceback.format_exception(etype, value, tb, limit=limit)


def print_exc(exc_info=None, context=None):
    """Prints the stack trace of the current exception or the passed one.
    Without debugging enabled only a short summary pointing at the cause
    gets printed.
    """

    if exc_info is None:
        exc_info = sys.exc_info()

    etype, value, tb = exc_info

    if const.DEBUG:
        string = "".join(format_exception(etype, value, tb))
    else:
        text = "".join(traceback.format_exception_only(etype, value))
        try:
            filename, lineno, name, line = traceback.extract_tb(tb)[-1]
        except IndexError:
            string = text
        else:
            string = "%s:%s:%s: %s" % (
                os.path.basename(filename), lineno, name, text)

    _print_message(string, context, False, "E", "red", "errors")


def print_d(string, context=None):
    """Print debugging information."""

    _print_message(string, context, True, "D", "green", "debug")


def print_w(string, context=None):
    """Print warnings"""

    _print_message(string, context, True, "W", "yellow", "warnings")


def print_e(string, context=None):
    """Print errors"""

    _print_message(string, context, False, "E", "red", "errors")


class PrintHandler(logging.Handler):
    """Converts logging records to our logging format"""

    def emit(self, record):
        print_func = {
            "DEBUG": print_d, "INFO": print_d, "WARNING": print_w,
            "ERROR": print_e, "CRITICAL": print_e,
        }.get(record.levelname, print_d)

        exc_info = record.exc_info
        context = "%s.%s" % (record.module, record.funcName)
        record.exc_info = None
        print_func(self.format(record), context=context)
        if exc_info is not None:
            print_exc(exc_info, context=context)
