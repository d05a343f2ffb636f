#!/usr/bin/env python3

"""
Framebuffer Emulator

Programs cannot write directly into video RAM.  Instead, sprites are drawn to
the screen by XORing individual pixels, so the only operations needed are
clearing the screen and flipping a pixel.

Collisions (where a pixel was set, but was unset by an XOR) are reported back
to the caller.  Coordinates always wrap around the edges of the screen.

Nothing here knows how to draw to the host.  Instead, 'redraw' is raised
whenever a pixel actually changes, and the host clears it once it has caught
up, so unchanged frames don't have to be painted.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Framebuffer:
    def __init__(self, vid_width, vid_height):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.pixels = [False] * self.vid_size
        self.redraw = True  # Always paint the first frame

    def clear(self):
        self.pixels[:] = [False] * self.vid_size
        self.redraw = True

    def xor_pixel(self, x, y):
        # Returns True if an on pixel was switched off
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = y * self.vid_width + x
        collision = self.pixels[vram_loc]
        self.pixels[vram_loc] = not collision
        self.redraw = True

        return collision

    def get_pixel(self, x, y):
        return self.pixels[y * self.vid_width + x]

    def get_vid_size(self):
        return self.vid_width, self.vid_height
