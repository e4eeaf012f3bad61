# log_utils.py -- Logging utilities for uleb128
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

"""Logging utilities for uleb128.

uleb128 is used as a library, so by default nothing it logs should reach the
user. The package logger carries a no-op handler to keep the logging module
from complaining about missing handlers; applications that want output call
default_logging_config() or configure logging themselves.

The codec only logs at DEBUG level, and only when it is about to raise, so
DEBUG output from the uleb128 loggers is what ULEB128_TRACE switches on.
"""

import logging
import os
import sys

getLogger = logging.getLogger

TRACE_ENVIRONMENT_VARIABLE = "ULEB128_TRACE"


class _NullHandler(logging.Handler):
    """No-op logging handler to avoid unexpected logging warnings."""

    def emit(self, record: logging.LogRecord) -> None:
        pass


_NULL_HANDLER = _NullHandler()
_ULEB128_LOGGER = getLogger("uleb128")
_ULEB128_LOGGER.addHandler(_NULL_HANDLER)


def trace_enabled() -> bool:
    """Check whether ULEB128_TRACE asks for codec debug output.

    Unset, empty, "0", "false" and "no" (in any case) mean off.
    """
    value = os.environ.get(TRACE_ENVIRONMENT_VARIABLE, "").strip().lower()
    return value not in ("", "0", "false", "no")


def default_logging_config(trace: bool | None = None) -> None:
    """Set up logging output for uleb128 on stderr.

    Args:
      trace: Show the codec's DEBUG messages. Defaults to the value of
        the ULEB128_TRACE environment variable.
    """
    remove_null_handler()
    if trace is None:
        trace = trace_enabled()
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    _ULEB128_LOGGER.setLevel(logging.DEBUG if trace else logging.INFO)


def remove_null_handler() -> None:
    """Remove the null handler from the uleb128 loggers.

    If a caller wants to set up logging using something other than
    default_logging_config, calling this function first is a minor optimization
    to avoid the overhead of using the _NullHandler.
    """
    _ULEB128_LOGGER.removeHandler(_NULL_HANDLER)
