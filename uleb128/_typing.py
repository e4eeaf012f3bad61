# _typing.py -- Common type definitions for uleb128
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

"""Common type definitions for uleb128."""

import sys
from typing import Protocol, runtime_checkable

if sys.version_info >= (3, 12):
    from collections.abc import Buffer
else:
    Buffer = bytes | bytearray | memoryview

__all__ = ["Buffer", "ByteSink", "ByteSource"]


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for objects that bytes can be decoded from.

    Binary file objects and :class:`io.BytesIO` satisfy it.
    """

    def read(self, size: int = -1, /) -> bytes:
        """Read up to size bytes; a shorter result means end of input."""
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Protocol for objects that encoded bytes can be written to."""

    def write(self, data: Buffer, /) -> int | None:
        """Write data, returning the number of bytes accepted."""
        ...
