#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries from the host's storage.  The Machine itself only
ever sees the bytes.
"""

__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()
