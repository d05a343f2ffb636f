#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

Key changes are forwarded to 'key_handler', which is normally the Machine's
'set_key' method.  Nothing here debounces or repeats keys.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import NUM_KEYS


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap, key_handler):
        self.keymap_dict = {}
        self.key_handler = key_handler
        keymap_split = keymap.split(",")

        if len(keymap_split) != NUM_KEYS:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise InputsError("Defined keys are not all integer values") from None

            if key_defined_ord in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

    def process_messages(self):
        return False  # Don't exit the program

    def host_key_changed(self, host_key, pressed):
        # Returns the hex key affected, or None if the host key isn't mapped
        hex_key = self.keymap_dict.get(host_key)

        if hex_key is not None:
            self.key_handler(hex_key, pressed)

        return hex_key

    def shutdown(self):
        pass
