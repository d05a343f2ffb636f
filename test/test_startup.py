#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO
from mchip import StartupError, main
from mchip.errors import ImageTooLarge


class TestStartup(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)

    def _args(self, rom, **overrides):
        filename = os.path.join(self.temp_dir.name, "test.ch8")

        with open(filename, "wb") as f:
            f.write(rom)

        args = {
            "filename": filename, "clock_speed": None, "renderer": "null", "scale": None, "smoothing": 0,
            "keymap": None, "palette": None, "frames": 2
        }
        args.update(overrides)
        return args

    def _main(self, args):
        with redirect_stdout(StringIO()) as output:
            main(args)

        return output.getvalue()

    def test_startup_null_renderer(self):
        self.assertIn("MonoChip", self._main(self._args(b"\x12\x00")))

    def test_startup_rom_too_large(self):
        self.assertRaises(ImageTooLarge, self._main, self._args(b"\x00" * 0x1000))

    def test_startup_bad_clock_speed(self):
        self.assertRaises(StartupError, self._main, self._args(b"\x12\x00", clock_speed=0))

    def test_startup_bad_renderer(self):
        self.assertRaises(StartupError, self._main, self._args(b"\x12\x00", renderer="curses"))
