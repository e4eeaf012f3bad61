# varint.py -- Unsigned LEB128 encoding/decoding
# Copyright (C) 2026 The uleb128 developers
#
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later
# uleb128 is dual-licensed under the Apache License, Version 2.0 and the GNU
# General Public License as published by the Free Software Foundation; version 2.0
# or (at your option) any later version. You can redistribute it and/or
# modify it under the terms of either of these two licenses.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# You should have received a copy of the licenses; if not, see
# <http://www.gnu.org/licenses/> for a copy of the GNU General Public License
# and <http://www.apache.org/licenses/LICENSE-2.0> for a copy of the Apache
# License, Version 2.0.
#

"""Unsigned LEB128 encoding/decoding.

Each encoded byte carries 7 value bits in its low bits, least significant
group first. Bit 7 is set on every byte except the last one of an integer.

Integers are read from a byte source (anything with ``read(n)``) and written
to a byte sink (anything with ``write(data)``), one byte at a time. Decoding
consumes exactly the bytes of one integer, so several integers can be read
back to back from the same stream.

Examples:
    127 -> 7f
    128 -> 80 01
    300 -> ac 02
"""

from io import BytesIO

from ._typing import ByteSink, ByteSource
from .errors import IoFailure, LengthOverflow
from .log_utils import getLogger

__all__ = [
    "ULEB128_U32_MAX_LENGTH",
    "ULEB128_U64_MAX_LENGTH",
    "decode_u32",
    "decode_u32_bytes",
    "decode_u64",
    "decode_u64_bytes",
    "encode_u32",
    "encode_u32_bytes",
    "encode_u64",
    "encode_u64_bytes",
    "encoded_length_u32",
    "encoded_length_u64",
    "max_value",
]

logger = getLogger(__name__)

# ceil(32 / 7) and ceil(64 / 7)
ULEB128_U32_MAX_LENGTH = 5
ULEB128_U64_MAX_LENGTH = 10

VALUE_MASK = 0x7F
CONTINUATION_BIT = 0x80
VALUE_LENGTH = 7

_U32_MASK = (1 << 32) - 1
_U64_MASK = (1 << 64) - 1


def max_value(length: int) -> int:
    """Return the largest value that fits in length encoded bytes.

    Args:
      length: Number of encoded bytes
    Returns:
      128 ** length - 1
    """
    return (1 << (VALUE_LENGTH * length)) - 1


def _check_value(value: int, bits: int) -> None:
    if value < 0:
        raise ValueError("value must be non-negative")
    if value >> bits:
        raise ValueError(f"value must be <= 2^{bits}-1")


def _encoded_length(value: int, max_length: int) -> int:
    for length in range(1, max_length):
        if value <= max_value(length):
            return length
    return max_length


def encoded_length_u32(value: int) -> int:
    """Compute the number of bytes encode_u32 would write for value.

    Args:
      value: Unsigned 32-bit integer
    Returns:
      Encoded length in bytes, between 1 and ULEB128_U32_MAX_LENGTH
    Raises:
      ValueError: if value does not fit in 32 bits
    """
    _check_value(value, 32)
    return _encoded_length(value, ULEB128_U32_MAX_LENGTH)


def encoded_length_u64(value: int) -> int:
    """Compute the number of bytes encode_u64 would write for value.

    Args:
      value: Unsigned 64-bit integer
    Returns:
      Encoded length in bytes, between 1 and ULEB128_U64_MAX_LENGTH
    Raises:
      ValueError: if value does not fit in 64 bits
    """
    _check_value(value, 64)
    return _encoded_length(value, ULEB128_U64_MAX_LENGTH)


def _read_byte(source: ByteSource) -> int:
    # io raises ValueError on a closed file
    try:
        data = source.read(1)
    except (OSError, ValueError) as e:
        logger.debug("reading from %r failed: %s", source, e)
        raise IoFailure(e) from e
    if not data:
        e = EOFError("failed to fill whole buffer")
        logger.debug("unexpected end of input reading from %r", source)
        raise IoFailure(e) from e
    return data[0]


def _write_byte(sink: ByteSink, byte: int) -> None:
    try:
        written = sink.write(bytes([byte]))
    except (OSError, ValueError) as e:
        logger.debug("writing to %r failed: %s", sink, e)
        raise IoFailure(e) from e
    # Sinks that do not report a count are taken to accept everything
    if written is not None and written < 1:
        e = OSError("failed to write whole buffer")
        logger.debug("%r rejected a write", sink)
        raise IoFailure(e) from e


def _decode(source: ByteSource, max_length: int, mask: int) -> int:
    value = 0
    bytes_read = 0
    while True:
        byte = _read_byte(source)
        value |= (byte & VALUE_MASK) << (VALUE_LENGTH * bytes_read)
        bytes_read += 1
        if bytes_read > max_length:
            logger.debug("encoded integer longer than %d bytes", max_length)
            raise LengthOverflow(max_length)
        if not (byte & CONTINUATION_BIT):
            # Bits beyond the width are dropped, as a fixed-width shift would
            return value & mask


def _encode(value: int, sink: ByteSink) -> None:
    while True:
        byte = value & VALUE_MASK
        value >>= VALUE_LENGTH
        if value:
            byte |= CONTINUATION_BIT
        _write_byte(sink, byte)
        if not value:
            return


def decode_u32(source: ByteSource) -> int:
    """Read an unsigned 32-bit integer encoded in LEB128 from a source.

    Exactly the bytes belonging to the integer are consumed. Non-minimal
    encodings are accepted as long as they fit in ULEB128_U32_MAX_LENGTH
    bytes.

    Args:
      source: Byte source to read from
    Returns:
      Decoded integer
    Raises:
      IoFailure: if the source fails or ends before the integer does
      LengthOverflow: if the encoding is longer than 5 bytes
    """
    return _decode(source, ULEB128_U32_MAX_LENGTH, _U32_MASK)


def decode_u64(source: ByteSource) -> int:
    """Read an unsigned 64-bit integer encoded in LEB128 from a source.

    Args:
      source: Byte source to read from
    Returns:
      Decoded integer
    Raises:
      IoFailure: if the source fails or ends before the integer does
      LengthOverflow: if the encoding is longer than 10 bytes
    """
    return _decode(source, ULEB128_U64_MAX_LENGTH, _U64_MASK)


def encode_u32(value: int, sink: ByteSink) -> None:
    """Write an unsigned 32-bit integer to a sink, encoded in LEB128.

    The minimal encoding is always used; 0 is written as a single 0x00.

    Args:
      value: Integer to encode
      sink: Byte sink to write to
    Raises:
      ValueError: if value does not fit in 32 bits
      IoFailure: if the sink fails or rejects a write
    """
    _check_value(value, 32)
    _encode(value, sink)


def encode_u64(value: int, sink: ByteSink) -> None:
    """Write an unsigned 64-bit integer to a sink, encoded in LEB128.

    Args:
      value: Integer to encode
      sink: Byte sink to write to
    Raises:
      ValueError: if value does not fit in 64 bits
      IoFailure: if the sink fails or rejects a write
    """
    _check_value(value, 64)
    _encode(value, sink)


def encode_u32_bytes(value: int) -> bytes:
    """Encode an unsigned 32-bit integer in LEB128.

    Args:
      value: Integer to encode
    Returns:
      Encoded bytes
    """
    f = BytesIO()
    encode_u32(value, f)
    return f.getvalue()


def encode_u64_bytes(value: int) -> bytes:
    """Encode an unsigned 64-bit integer in LEB128.

    Args:
      value: Integer to encode
    Returns:
      Encoded bytes
    """
    f = BytesIO()
    encode_u64(value, f)
    return f.getvalue()


def _decode_bytes(
    data: bytes, offset: int, max_length: int, mask: int
) -> tuple[int, int]:
    if offset < 0:
        raise ValueError("offset must be non-negative")
    f = BytesIO(data)
    f.seek(offset)
    value = _decode(f, max_length, mask)
    return value, f.tell()


def decode_u32_bytes(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 32-bit LEB128 integer from bytes.

    Args:
      data: Bytes to decode from
      offset: Starting offset in data
    Returns:
      tuple of (decoded_value, new_offset)
    """
    return _decode_bytes(data, offset, ULEB128_U32_MAX_LENGTH, _U32_MASK)


def decode_u64_bytes(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 64-bit LEB128 integer from bytes.

    Args:
      data: Bytes to decode from
      offset: Starting offset in data
    Returns:
      tuple of (decoded_value, new_offset)
    """
    return _decode_bytes(data, offset, ULEB128_U64_MAX_LENGTH, _U64_MASK)
