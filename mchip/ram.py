#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes.  Every
access is bounds-checked, because a program reaching outside the 4K address
space is broken and must not be allowed to silently wrap or read garbage.

A single region can be marked read-only.  This is used to keep the system font
intact once it has been written.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import MemoryAccessError


class RAM:
    def __init__(self, mem_size):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size
        self.protect_start = 0
        self.protect_end = 0  # Exclusive, so an empty region by default

    def read(self, location):
        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_overflow(location + size - 1)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_overflow(location)
        self.check_protected(location, 1)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        block_top = location + block_size
        self.check_overflow(block_top - 1)
        self.check_protected(location, block_size)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location > self.mem_top:
            raise MemoryAccessError("Memory overflow at address 0x{:04x}".format(location))

    def check_protected(self, location, size):
        if location < self.protect_end and location + size > self.protect_start:
            raise MemoryAccessError("Write to read-only memory at address 0x{:04x}".format(location))

    def protect(self, location, size):
        # Only one region is ever needed, so a new call replaces the old one
        self.check_overflow(location + size - 1)
        self.protect_start = location
        self.protect_end = location + size
