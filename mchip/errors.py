#!/usr/bin/env python3

"""
Machine Errors

Everything the interpreter core can fail with.  None of these are recovered
from inside the core: once one is raised, the host should stop stepping the
machine, since a half-executed instruction may have left state behind.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class MachineError(Exception):
    pass


class ImageTooLarge(MachineError):
    def __init__(self, size, max_size):
        self.size = size
        self.max_size = max_size
        super().__init__("Program image is {} bytes, but only {} bytes are available.".format(size, max_size))


class UnknownOpcode(MachineError):
    def __init__(self, opcode, address=None):
        self.opcode = opcode
        self.address = address

        if address is None:
            message = "Opcode 0x{:04x} is not recognised.".format(opcode)
        else:
            message = "Opcode 0x{:04x} at address 0x{:03x} is not recognised.".format(opcode, address)

        super().__init__(message)


class MemoryAccessError(MachineError):
    pass


class StackError(MachineError):
    pass


class StackOverflow(StackError):
    pass


class StackUnderflow(StackError):
    pass


class KeypadError(MachineError):
    pass
