#!/usr/bin/env python3

"""
Emulator Driver

Runs a Machine in real time.  Everything is paced in 60Hz frames: each frame
processes host inputs, executes the frame's share of instructions, ticks the
timers once, and repaints the display if anything changed.

Instruction throughput is set separately from the frame rate, so programs that
count on a fixed number of instructions per timer tick still behave.  When the
clock speed doesn't divide evenly into frames, the leftover fraction of an
instruction is carried into the next frame.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, TIMER_FREQ

FRAME_INTERVAL = 1.0 / TIMER_FREQ


class Emulator:
    def __init__(self, machine, renderer, inputs, clock_speed=None, max_frames=None):
        self.machine = machine
        self.renderer = renderer
        self.inputs = inputs
        self.clock_speed = DEFAULT_CLOCK_SPEED if clock_speed is None else clock_speed
        self.ops_per_frame = self.clock_speed / TIMER_FREQ
        self.max_frames = max_frames or None  # 0 also means run forever
        self.op_budget = 0.0
        self.frame_count = 0

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0
        self.report_perf()

    def run(self):
        next_frame_time = perf_counter()

        while self.run_frame():
            this_time = perf_counter()

            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            next_frame_time += FRAME_INTERVAL

            if next_frame_time < this_time:
                # Too far behind to catch up, so don't try to run a burst of frames
                next_frame_time = this_time

            while perf_counter() < next_frame_time:  # Unfortunately we have to do this to get the timing right
                pass

    def run_frame(self):
        # Returns False once the emulator should stop
        if self.max_frames is not None and self.frame_count >= self.max_frames:
            return False

        if self.inputs.process_messages():
            return False

        machine = self.machine
        self.op_budget += self.ops_per_frame
        ops = int(self.op_budget)
        self.op_budget -= ops

        for _ in range(ops):
            machine.step()

        machine.tick_timers()
        self.refresh_display()
        self.frame_count += 1
        self.perf_counter_ops += ops
        self.perf_counter_fps += 1

        return True

    def refresh_display(self):
        machine = self.machine

        if not machine.redraw:
            return

        set_pixel = self.renderer.set_pixel

        for location, lit in enumerate(machine.video):
            set_pixel(location, lit)

        self.renderer.refresh_display(True)
        machine.redraw = False

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
