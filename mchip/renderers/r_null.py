#!/usr/bin/env python3

"""
Headless Renderer Plugin

Base class for the PyGame renderer, and the renderer used when running with
'-r null' or under test.  The emulator hands it one lit/unlit value per pixel
whenever the machine raises its redraw flag, and nothing is shown.

The most recent window title (FPS/OPS report) is kept in 'title', so headless
runs can still be checked.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.title = ""
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        # Called with the machine's display size before the first frame
        self.width = width
        self.height = height

    def set_pixel(self, location, lit):  # pylint: disable=unused-argument
        # 'location' is a row-major index, matching Machine.video
        pass

    def refresh_display(self, content_changed=False):
        pass

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
