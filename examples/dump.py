#!/usr/bin/python3
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

# Print every unsigned LEB128 integer stored back to back in a file.
#
# Example usage:
#  python examples/dump.py values.bin

import os
import sys

from uleb128 import ULeb128Error, decode_u64

with open(sys.argv[1], "rb") as f:
    size = os.fstat(f.fileno()).st_size
    while f.tell() < size:
        offset = f.tell()
        try:
            value = decode_u64(f)
        except ULeb128Error as e:
            sys.exit(f"{offset}: {e}")
        print(f"{offset}: {value}")
