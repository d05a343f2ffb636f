#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.framebuffer import Framebuffer


class TestFrameBuffer(unittest.TestCase):
    def setUp(self):
        self.framebuffer = Framebuffer(4, 3)

    def test_framebuffer_init(self):
        self.assertEqual((4, 3), self.framebuffer.get_vid_size())
        self.assertEqual([False] * 12, self.framebuffer.pixels)
        self.assertTrue(self.framebuffer.redraw)

    def test_framebuffer_xor_pixel(self):
        fb = self.framebuffer
        fb.redraw = False
        self.assertFalse(fb.xor_pixel(1, 2))
        self.assertTrue(fb.get_pixel(1, 2))
        self.assertTrue(fb.pixels[9])
        self.assertTrue(fb.redraw)
        self.assertTrue(fb.xor_pixel(1, 2))  # Switching it off again is a collision
        self.assertFalse(fb.get_pixel(1, 2))

    def test_framebuffer_wrapping(self):
        fb = self.framebuffer
        fb.xor_pixel(4, 3)
        self.assertTrue(fb.get_pixel(0, 0))
        fb.xor_pixel(9, 7)
        self.assertTrue(fb.get_pixel(1, 1))

    def test_framebuffer_clear(self):
        fb = self.framebuffer
        fb.xor_pixel(0, 0)
        fb.xor_pixel(3, 2)
        fb.redraw = False
        pixels = fb.pixels
        fb.clear()
        self.assertEqual([False] * 12, fb.pixels)
        self.assertIs(pixels, fb.pixels)  # Cleared in place, so held references stay valid
        self.assertTrue(fb.redraw)
