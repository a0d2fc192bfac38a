# Copyright 2026 The charfold authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os

from tests import TestCase, mkdtemp
from .helper import temp_filename

from charfold.util.config import Config, Error


class TConfig(TestCase):

    def test_read_garbage_file(self):
        conf = Config()
        with temp_filename() as filename:
            with open(filename, "wb") as f:
                f.write(b"\xf1=\xab\xac")
            self.assertRaises(Error, conf.read, filename)

    def test_read_missing(self):
        conf = Config()
        conf.read(os.path.join(mkdtemp(), "nope.cfg"))
        assert conf.is_empty()

    def test_set(self):
        conf = Config()
        conf.add_section("foo")
        conf.set("foo", "bar", 1)
        self.assertEqual(conf.get("foo", "bar"), "1")
        conf.set("foo", "bool", True)
        self.assertEqual(conf.get("foo", "bool"), "true")
        self.assertRaises(TypeError, conf.set, "foo", "bar", b"x")

    def test_get(self):
        conf = Config()
        conf.add_section("foo")
        conf.set("foo", "str", "foobar")
        conf.set("foo", "bool", "True")
        self.assertEqual(conf.get("foo", "str"), "foobar")
        self.assertEqual(conf.getboolean("foo", "bool"), True)
        self.assertRaises(Error, conf.get, "foo", "nothing")
        self.assertRaises(Error, conf.getboolean, "foo", "str")

    def test_get_default(self):
        conf = Config()
        conf.add_section("foo")
        self.assertEqual(conf.getboolean("foo", "nothing", True), True)
        self.assertEqual(conf.get("foo", "nothing", "foo"), "foo")
        self.assertEqual(conf.getstringlist("foo", "nothing", ["a"]), ["a"])

    def test_defaults(self):
        conf = Config()
        conf.defaults.add_section("foo")
        conf.defaults.set("foo", "bar", "true")
        self.assertEqual(conf.getboolean("foo", "bar"), True)
        assert conf.has_section("foo")

        # setting works without adding the section first
        conf.set("foo", "bar", False)
        self.assertEqual(conf.getboolean("foo", "bar"), False)
        self.assertEqual(conf.defaults.getboolean("foo", "bar"), True)

    def test_stringlist(self):
        conf = Config()
        conf.add_section("foo")
        values = ["a b", "c,d", "\xe4 \"x\"", ""]
        conf.setstringlist("foo", "bar", values)
        self.assertEqual(conf.getstringlist("foo", "bar"), values)

        conf.set("foo", "empty", "")
        self.assertEqual(conf.getstringlist("foo", "empty"), [])

    def test_write_read(self):
        conf = Config()
        conf.add_section("fold")
        conf.set("fold", "symmetric", True)
        conf.setstringlist("fold", "include", ["a \xe4"])
        with temp_filename() as filename:
            conf.write(filename)
            new = Config()
            new.read(filename)
        self.assertEqual(new.getboolean("fold", "symmetric"), True)
        self.assertEqual(new.getstringlist("fold", "include"), ["a \xe4"])

    def test_clear(self):
        conf = Config()
        conf.add_section("foo")
        self.assertFalse(conf.is_empty())
        conf.clear()
        assert conf.is_empty()
