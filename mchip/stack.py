#!/usr/bin/env python3

"""
Stack Emulator

The call stack lives outside system RAM, since programs have no way of
addressing it.  It is a fixed set of slots with a pointer to the next free one.
Running off either end is a fault in the program being run, so it is reported
rather than wrapped.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import StackOverflow, StackUnderflow


class Stack:
    def __init__(self, size):
        self.items = [0] * size
        self.size = size
        self.pointer = 0

    def push(self, item):
        if self.pointer >= self.size:
            raise StackOverflow("Stack overflow (depth {})".format(self.size))

        self.items[self.pointer] = item
        self.pointer += 1

    def pop(self):
        if self.pointer <= 0:
            raise StackUnderflow("Stack underflow")

        self.pointer -= 1
        return self.items[self.pointer]

    def get_items(self):
        # Live entries only, oldest first
        return self.items[:self.pointer]
