# errors.py -- errors for uleb128
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

"""Exception classes raised by the LEB128 codec.

There are exactly two failure kinds, both subclasses of :class:`ULeb128Error`:

- :class:`IoFailure` when the underlying byte source or sink fails
- :class:`LengthOverflow` when an encoded integer runs past the maximum
  number of bytes allowed for its width
"""

__all__ = ["IoFailure", "LengthOverflow", "ULeb128Error"]


class ULeb128Error(Exception):
    """Base class for errors raised by LEB128 operations.

    Do not instantiate directly.
    """

    def __eq__(self, other: object) -> bool:
        """Check equality between errors of the same kind.

        Args:
            other: The object to compare with.

        Returns:
            True if both are the same error type with the same args.
        """
        if not isinstance(other, ULeb128Error):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        """Return a hash based on the error type and its args."""
        return hash((type(self), self.args))


class IoFailure(ULeb128Error):
    """An I/O operation on the byte source or sink failed."""

    def __init__(self, cause: BaseException) -> None:
        """Initialize an IoFailure.

        Args:
            cause: The exception raised (or synthesized) by the source or sink.
        """
        self.cause = cause
        ULeb128Error.__init__(self, cause)

    def __str__(self) -> str:
        """Return a human readable description of the failure."""
        return f"io error: {self.cause}"

    def __eq__(self, other: object) -> bool:
        """Check equality, comparing the wrapped causes by type and args."""
        if not isinstance(other, IoFailure):
            return NotImplemented
        return type(self.cause) is type(other.cause) and (
            self.cause.args == other.cause.args
        )

    def __hash__(self) -> int:
        """Return a hash based on the wrapped cause."""
        return hash((IoFailure, type(self.cause), self.cause.args))


class LengthOverflow(ULeb128Error):
    """The encoded integer is longer than its width permits."""

    def __init__(self, max_bytes: int) -> None:
        """Initialize a LengthOverflow.

        Args:
            max_bytes: The maximum number of bytes permitted for the width
              being decoded.
        """
        self.max_bytes = max_bytes
        ULeb128Error.__init__(self, max_bytes)

    def __str__(self) -> str:
        """Return a human readable description of the failure."""
        return f"can not read more than {self.max_bytes} bytes"
