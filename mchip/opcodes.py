#!/usr/bin/env python3

"""
Instruction Decoder

Turns a raw 16-bit opcode into an Instruction: the pattern it matched (e.g.
"8xy4") plus every operand field it could carry.  Executing the instruction is
left to the Machine, so decoding can be checked on its own.

Which bits identify an instruction depends on its first nibble:
    * 0x0           - the whole opcode (00E0, 00EE)
    * 0x5, 0x8, 0x9 - first and last nibbles (bitmask 0xF00F)
    * 0xE, 0xF      - first nibble and last byte (bitmask 0xF0FF)
    * anything else - first nibble only
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .errors import UnknownOpcode

# n = Nibble
# kk = Byte
# nnn = address
# x/y = register (0-15)
Instruction = namedtuple("Instruction", ["pattern", "opcode", "x", "y", "n", "kk", "nnn"])

IDENTIFIER_MASKS = {
    0x0: 0xFFFF,
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

PATTERNS = {
    0x00E0: "00E0",  # CLS
    0x00EE: "00EE",  # RET
    0x1000: "1nnn",  # JP addr
    0x2000: "2nnn",  # CALL addr
    0x3000: "3xkk",  # SE Vx, byte
    0x4000: "4xkk",  # SNE Vx, byte
    0x5000: "5xy0",  # SE Vx, Vy
    0x6000: "6xkk",  # LD Vx, byte
    0x7000: "7xkk",  # ADD Vx, byte
    0x8000: "8xy0",  # LD Vx, Vy
    0x8001: "8xy1",  # OR Vx, Vy
    0x8002: "8xy2",  # AND Vx, Vy
    0x8003: "8xy3",  # XOR Vx, Vy
    0x8004: "8xy4",  # ADD Vx, Vy
    0x8005: "8xy5",  # SUB Vx, Vy
    0x8006: "8xy6",  # SHR Vx
    0x8007: "8xy7",  # SUBN Vx, Vy
    0x800E: "8xyE",  # SHL Vx
    0x9000: "9xy0",  # SNE Vx, Vy
    0xA000: "Annn",  # LD I, addr
    0xB000: "Bnnn",  # JP V0, addr
    0xC000: "Cxkk",  # RND Vx, byte
    0xD000: "Dxyn",  # DRW Vx, Vy, nibble
    0xE09E: "Ex9E",  # SKP Vx
    0xE0A1: "ExA1",  # SKNP Vx
    0xF007: "Fx07",  # LD Vx, DT
    0xF00A: "Fx0A",  # LD Vx, K
    0xF015: "Fx15",  # LD DT, Vx
    0xF018: "Fx18",  # LD ST, Vx
    0xF01E: "Fx1E",  # ADD I, Vx
    0xF029: "Fx29",  # LD F, Vx
    0xF033: "Fx33",  # LD B, Vx
    0xF055: "Fx55",  # LD [I], Vx
    0xF065: "Fx65"   # LD Vx, [I]
}


def decode(opcode, address=None):
    # 'address' is only used to make the error more helpful
    if opcode < 0 or opcode > 0xFFFF:
        raise UnknownOpcode(opcode, address)

    pattern = PATTERNS.get(opcode & IDENTIFIER_MASKS.get(opcode >> 12, 0xF000))

    if pattern is None:
        raise UnknownOpcode(opcode, address)

    return Instruction(
        pattern=pattern,
        opcode=opcode,
        x=(opcode & 0xF00) >> 8,
        y=(opcode & 0xF0) >> 4,
        n=opcode & 0xF,
        kk=opcode & 0xFF,
        nnn=opcode & 0xFFF
    )
