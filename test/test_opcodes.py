#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.errors import UnknownOpcode
from mchip.opcodes import PATTERNS, decode


class TestDecode(unittest.TestCase):
    def test_decode_fields(self):
        instruction = decode(0xD12F)
        self.assertEqual("Dxyn", instruction.pattern)
        self.assertEqual(0xD12F, instruction.opcode)
        self.assertEqual(0x1, instruction.x)
        self.assertEqual(0x2, instruction.y)
        self.assertEqual(0xF, instruction.n)
        self.assertEqual(0x2F, instruction.kk)
        self.assertEqual(0x12F, instruction.nnn)

    def test_decode_patterns(self):
        for opcode, pattern in (
            (0x00E0, "00E0"), (0x00EE, "00EE"), (0x1ABC, "1nnn"), (0x2ABC, "2nnn"), (0x3A12, "3xkk"),
            (0x4A12, "4xkk"), (0x5AB0, "5xy0"), (0x6A12, "6xkk"), (0x7A12, "7xkk"), (0x8AB0, "8xy0"),
            (0x8AB1, "8xy1"), (0x8AB2, "8xy2"), (0x8AB3, "8xy3"), (0x8AB4, "8xy4"), (0x8AB5, "8xy5"),
            (0x8AB6, "8xy6"), (0x8AB7, "8xy7"), (0x8ABE, "8xyE"), (0x9AB0, "9xy0"), (0xAABC, "Annn"),
            (0xBABC, "Bnnn"), (0xCA12, "Cxkk"), (0xDAB5, "Dxyn"), (0xEA9E, "Ex9E"), (0xEAA1, "ExA1"),
            (0xFA07, "Fx07"), (0xFA0A, "Fx0A"), (0xFA15, "Fx15"), (0xFA18, "Fx18"), (0xFA1E, "Fx1E"),
            (0xFA29, "Fx29"), (0xFA33, "Fx33"), (0xFA55, "Fx55"), (0xFA65, "Fx65")
        ):
            self.assertEqual(pattern, decode(opcode).pattern)

        # Every pattern should be reachable by at least one of the above
        self.assertEqual(34, len(PATTERNS))

    def test_decode_fail(self):
        for opcode in (
            0x0000, 0x0001, 0x00E1, 0x00FF, 0x0123, 0x5001, 0x8008, 0x800F, 0x801F, 0x9001, 0xE09F, 0xE0A2,
            0xF000, 0xF100, 0xFFFF
        ):
            with self.assertRaises(UnknownOpcode) as context:
                decode(opcode)

            self.assertEqual(opcode, context.exception.opcode)
            self.assertIsNone(context.exception.address)

    def test_decode_out_of_range(self):
        self.assertRaises(UnknownOpcode, decode, 0x12000)
        self.assertRaises(UnknownOpcode, decode, -1)

    def test_decode_fail_address(self):
        with self.assertRaises(UnknownOpcode) as context:
            decode(0x8ABF, 0x2FE)

        self.assertEqual(0x2FE, context.exception.address)
        self.assertIn("0x8abf", str(context.exception))
        self.assertIn("0x2fe", str(context.exception))
