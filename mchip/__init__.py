#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_KEYMAP, VID_WIDTH, VID_HEIGHT
from .emulator import Emulator
from .hostio import Loader
from .machine import Machine


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    opt_renderer = args["renderer"] or "pygame"
    clock_speed = args["clock_speed"]

    if clock_speed is not None and clock_speed <= 0:
        raise StartupError("The clock speed must be at least 1 instruction per second.")

    if opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame  # noqa: F401
        except ImportError:
            raise StartupError(
                "PyGame does not appear to be installed.  Use the 'null' renderer to run without a display."
            )

        from .inputs.i_pygame import Inputs
        from .renderers.r_pygame import Renderer
    elif opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
    else:
        raise StartupError("Unknown renderer '{}'.".format(opt_renderer))

    # Build the machine, install the ROM, and check the keymap before opening any windows, so bad options fail cleanly
    machine = Machine()
    machine.load(Loader().load_binary(args["filename"]))
    inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, machine.set_key)

    renderer = Renderer(scale=args["scale"], palette=args["palette"], smoothing=args["smoothing"] or 0)
    renderer.set_resolution(VID_WIDTH, VID_HEIGHT)
    emulator = Emulator(machine, renderer, inputs, clock_speed=clock_speed, max_frames=args["frames"])

    try:
        emulator.run()
    finally:
        # The machine has stopped, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        inputs.shutdown()
        renderer.shutdown()
