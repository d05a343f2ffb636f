#!/usr/bin/env python3

"""
Machine Emulator (CHIP-8)

This is where all of the processing happens.  A Machine owns its RAM, stack,
framebuffer, registers, timers and keypad, and does nothing until the host
calls it:

    * step        - fetch, decode and execute exactly one instruction
    * tick_timers - count the delay and sound timers down once (call at 60Hz)
    * set_key     - press or release one of the 16 hex keys
    * load        - copy a program image into RAM at 0x200

The host reads 'video' and 'redraw' to know when and what to paint, and
'sound_timer' to know when a tone should be playing.  The Machine never
blocks, sleeps or touches the host directly, so any number of steps can be
run per timer tick.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import randint
from .constants import (
    MEM_SIZE, FONT_START, FONT_GLYPH_SIZE, PROGRAM_START, MAX_IMAGE_SIZE, VID_WIDTH, VID_HEIGHT, NUM_REGISTERS,
    NUM_KEYS, STACK_SIZE, SYSTEM_FONT
)
from .errors import ImageTooLarge, KeypadError
from .framebuffer import Framebuffer
from .opcodes import decode
from .ram import RAM
from .stack import Stack

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


def random_byte():
    return randint(0, 0xFF)


class Machine:
    def __init__(self, random_source=None):
        self.ram = RAM(MEM_SIZE)
        self.stack = Stack(STACK_SIZE)
        self.framebuffer = Framebuffer(VID_WIDTH, VID_HEIGHT)

        # Any zero-argument callable returning 0-255 will do, so tests can make Cxkk predictable
        self.random_source = random_byte if random_source is None else random_source

        # Write the system font into RAM, then lock it so nothing can overwrite it
        self.ram.write_block(FONT_START, SYSTEM_FONT)
        self.ram.protect(FONT_START, len(SYSTEM_FONT))

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Stores over 0xFF raise, so results must be masked
        self.i = 0  # Index register
        self.pc = PROGRAM_START
        self.debug_pc = PROGRAM_START  # Where the current instruction was fetched from
        self.opcode = 0

        # Initialise timers
        self.dt = 0  # Delay timer
        self.ds = 0  # Sound timer

        self.keys = [False] * NUM_KEYS

        self.instructions = {
            "00E0": self._00E0,
            "00EE": self._00EE,
            "1nnn": self._1nnn,
            "2nnn": self._2nnn,
            "3xkk": self._3xkk,
            "4xkk": self._4xkk,
            "5xy0": self._5xy0,
            "6xkk": self._6xkk,
            "7xkk": self._7xkk,
            "8xy0": self._8xy0,
            "8xy1": self._8xy1,
            "8xy2": self._8xy2,
            "8xy3": self._8xy3,
            "8xy4": self._8xy4,
            "8xy5": self._8xy5,
            "8xy6": self._8xy6,
            "8xy7": self._8xy7,
            "8xyE": self._8xyE,
            "9xy0": self._9xy0,
            "Annn": self._Annn,
            "Bnnn": self._Bnnn,
            "Cxkk": self._Cxkk,
            "Dxyn": self._Dxyn,
            "Ex9E": self._Ex9E,
            "ExA1": self._ExA1,
            "Fx07": self._Fx07,
            "Fx0A": self._Fx0A,
            "Fx15": self._Fx15,
            "Fx18": self._Fx18,
            "Fx1E": self._Fx1E,
            "Fx29": self._Fx29,
            "Fx33": self._Fx33,
            "Fx55": self._Fx55,
            "Fx65": self._Fx65
        }

    # Host interface

    def load(self, image):
        image_size = len(image)

        if image_size > MAX_IMAGE_SIZE:
            raise ImageTooLarge(image_size, MAX_IMAGE_SIZE)

        self.ram.write_block(PROGRAM_START, bytes(image))

    def step(self):
        # Keep track of the program counter before altering it, so errors can say where they happened
        self.debug_pc = self.pc
        self.opcode = self.fetch()
        self.inc_pc()  # Program counter updates after fetch, but before execute
        instruction = decode(self.opcode, self.debug_pc)
        self.execute(instruction)

        return instruction

    def execute(self, instruction):
        self.instructions[instruction.pattern](instruction)

    def tick_timers(self):
        if self.dt > 0:
            self.dt -= 1

        if self.ds > 0:
            self.ds -= 1

    def set_key(self, key, pressed):
        if key < 0 or key >= NUM_KEYS:
            raise ValueError("Key 0x{:x} is out of range (0x0-0xf)".format(key))

        self.keys[key] = bool(pressed)

    @property
    def video(self):
        return self.framebuffer.pixels

    @property
    def redraw(self):
        return self.framebuffer.redraw

    @redraw.setter
    def redraw(self, value):
        self.framebuffer.redraw = value

    @property
    def delay_timer(self):
        return self.dt

    @property
    def sound_timer(self):
        return self.ds

    # Internals

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def inc_pc(self):
        self.pc = (self.pc + 2) & 0xFFFF

    def dec_pc(self):
        # Only used to re-run an instruction (keypress wait)
        self.pc = (self.pc - 2) & 0xFFFF

    def is_key_down(self, key):
        if key >= NUM_KEYS:
            raise KeypadError(
                "Key 0x{:02x} requested by opcode 0x{:04x} at address 0x{:03x} does not exist".format(
                    key, self.opcode, self.debug_pc
                )
            )

        return self.keys[key]

    def get_keypress(self):
        # Lowest-numbered key held down, or None
        for key, pressed in enumerate(self.keys):
            if pressed:
                return key

        return None

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.pc = self.stack.pop()

    def _1nnn(self, ins):  # JP addr
        self.pc = ins.nnn

    def _2nnn(self, ins):  # CALL addr
        self.stack.push(self.pc)
        self.pc = ins.nnn

    def _3xkk(self, ins):  # SE Vx, byte
        if self.v[ins.x] == ins.kk:
            self.inc_pc()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.v[ins.x] != ins.kk:
            self.inc_pc()

    def _5xy0(self, ins):  # SE Vx, Vy
        if self.v[ins.x] == self.v[ins.y]:
            self.inc_pc()

    def _6xkk(self, ins):  # LD Vx, byte
        self.v[ins.x] = ins.kk

    def _7xkk(self, ins):  # ADD Vx, byte
        self.v[ins.x] = (self.v[ins.x] + ins.kk) & 0xFF  # No carry flag for this one

    def _8xy0(self, ins):  # LD Vx, Vy
        self.v[ins.x] = self.v[ins.y]

    def _8xy1(self, ins):  # OR Vx, Vy
        self.v[ins.x] |= self.v[ins.y]

    def _8xy2(self, ins):  # AND Vx, Vy
        self.v[ins.x] &= self.v[ins.y]

    def _8xy3(self, ins):  # XOR Vx, Vy
        self.v[ins.x] ^= self.v[ins.y]

    # Vf is written BEFORE Vx in the flag-setting instructions below, so if Vf is also the target, the result wins.
    # Add and subtract work from the operands as they were, but shifts re-read Vx after the flag has been set.

    def _8xy4(self, ins):  # ADD Vx, Vy
        val = self.v[ins.x] + self.v[ins.y]
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying
        self.v[ins.x] = val & 0xFF

    def _post_8xy5_8xy7(self, ins, val):  # Post-SUB/SUBN
        self.v[0xF] = int(val >= 0)  # Vf is set when NOT borrowing
        self.v[ins.x] = val & 0xFF

    def _8xy5(self, ins):  # SUB Vx, Vy
        self._post_8xy5_8xy7(ins, self.v[ins.x] - self.v[ins.y])

    def _8xy6(self, ins):  # SHR Vx
        self.v[0xF] = self.v[ins.x] & 1
        self.v[ins.x] >>= 1

    def _8xy7(self, ins):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(ins, self.v[ins.y] - self.v[ins.x])

    def _8xyE(self, ins):  # SHL Vx
        self.v[0xF] = self.v[ins.x] >> 7
        self.v[ins.x] = (self.v[ins.x] << 1) & 0xFF

    def _9xy0(self, ins):  # SNE Vx, Vy
        if self.v[ins.x] != self.v[ins.y]:
            self.inc_pc()

    def _Annn(self, ins):  # LD I, addr
        self.i = ins.nnn

    def _Bnnn(self, ins):  # JP V0, addr
        self.pc = ins.nnn + self.v[0]

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[ins.x] = self.random_source() & ins.kk

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        # Only the anchor is reduced first.  Each plotted pixel then wraps on its own inside the framebuffer.
        vid_width, vid_height = self.framebuffer.get_vid_size()
        vx_pos = self.v[ins.x] % vid_width
        vy_pos = self.v[ins.y] % vid_height
        sprite = self.ram.read_block(self.i, ins.n) if ins.n else b""
        collided = False

        for y, spr_data in enumerate(sprite):
            for x in range(8):
                if spr_data & (0x80 >> x):
                    # Don't stop drawing after a collision
                    if self.framebuffer.xor_pixel(vx_pos + x, vy_pos + y):
                        collided = True

        self.v[0xF] = int(collided)

    def _Ex9E(self, ins):  # SKP Vx
        if self.is_key_down(self.v[ins.x]):
            self.inc_pc()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.is_key_down(self.v[ins.x]):
            self.inc_pc()

    def _Fx07(self, ins):  # LD Vx, DT
        self.v[ins.x] = self.dt

    def _Fx0A(self, ins):  # LD Vx, K
        # Waiting here would stall the timers and the display, so return control to the host and come back to this
        # instruction on the next step instead.
        key = self.get_keypress()

        if key is None:
            self.dec_pc()
        else:
            self.v[ins.x] = key

    def _Fx15(self, ins):  # LD DT, Vx
        self.dt = self.v[ins.x]

    def _Fx18(self, ins):  # LD ST, Vx
        self.ds = self.v[ins.x]

    def _Fx1E(self, ins):  # ADD I, Vx
        self.i = (self.i + self.v[ins.x]) & 0xFFFF

    def _Fx29(self, ins):  # LD F, Vx
        self.i = FONT_START + FONT_GLYPH_SIZE * (self.v[ins.x] & 0xF)

    def _Fx33(self, ins):  # LD B, Vx
        val = self.v[ins.x]
        self.ram.write_block(self.i, bytes((val // 100, (val // 10) % 10, val % 10)))

    def _Fx55(self, ins):  # LD [I], Vx
        # Ensure with +1 that the final register is copied
        self.ram.write_block(self.i, self.v[:ins.x + 1])

    def _Fx65(self, ins):  # LD Vx, [I]
        self.v[:ins.x + 1] = self.ram.read_block(self.i, ins.x + 1)
