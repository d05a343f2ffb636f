#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.errors import MemoryAccessError
from mchip.ram import RAM


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_init(self):
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())
        self.assertEqual("fdfe", self.ram.read_block(1, 2).hex())

    def test_ram_byte_overflow(self):
        self.assertRaises(MemoryAccessError, self.ram.write, 5, 255)
        self.assertRaises(MemoryAccessError, self.ram.read, 5)

    def test_ram_block_overflow(self):
        self.assertRaises(MemoryAccessError, self.ram.write_block, 4, bytearray(b"\xFE\xFF"))
        self.assertRaises(MemoryAccessError, self.ram.read_block, 4, 2)
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_protect(self):
        self.ram.write_block(1, bytearray(b"\xAA\xBB"))
        self.ram.protect(1, 2)
        self.assertRaises(MemoryAccessError, self.ram.write, 1, 0)
        self.assertRaises(MemoryAccessError, self.ram.write, 2, 0)
        self.assertRaises(MemoryAccessError, self.ram.write_block, 0, bytearray(b"\x01\x02"))
        self.assertRaises(MemoryAccessError, self.ram.write_block, 2, bytearray(b"\x01\x02"))
        # Either side of the region is still writable
        self.ram.write(0, 0x11)
        self.ram.write_block(3, bytearray(b"\x33\x44"))
        self.assertEqual("11aabb3344", self.ram.mem.hex())
