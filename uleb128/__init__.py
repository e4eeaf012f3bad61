# __init__.py -- The uleb128 package
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

"""Unsigned LEB128 encoding and decoding of 32-bit and 64-bit integers."""

from .errors import IoFailure, LengthOverflow, ULeb128Error
from .varint import (
    ULEB128_U32_MAX_LENGTH,
    ULEB128_U64_MAX_LENGTH,
    decode_u32,
    decode_u32_bytes,
    decode_u64,
    decode_u64_bytes,
    encode_u32,
    encode_u32_bytes,
    encode_u64,
    encode_u64_bytes,
    encoded_length_u32,
    encoded_length_u64,
    max_value,
)

__version__ = (0, 1, 0)

__all__ = [
    "ULEB128_U32_MAX_LENGTH",
    "ULEB128_U64_MAX_LENGTH",
    "IoFailure",
    "LengthOverflow",
    "ULeb128Error",
    "__version__",
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
