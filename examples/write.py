#!/usr/bin/python3
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

# Write the integers given on the command line to a file, LEB128 encoded.
#
# Example usage:
#  python examples/write.py values.bin 1 127 128 300

import sys

from uleb128 import encode_u64, encoded_length_u64

with open(sys.argv[1], "wb") as f:
    for arg in sys.argv[2:]:
        value = int(arg)
        encode_u64(value, f)
        print(f"{value}: {encoded_length_u64(value)} bytes")
