# __init__.py -- The tests for uleb128
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

"""Tests for uleb128."""

__all__ = ["TestCase"]

import doctest
import os
import unittest
from unittest import TestCase as _TestCase


class TestCase(_TestCase):
    """Base class for uleb128 tests.

    Keeps ULEB128_TRACE from the calling environment out of the tests.
    """

    def setUp(self) -> None:
        super().setUp()
        self.overrideEnv("ULEB128_TRACE", None)

    def overrideEnv(self, name: str, value: str | None) -> None:
        def restore() -> None:
            if oldval is not None:
                os.environ[name] = oldval
            else:
                os.environ.pop(name, None)

        oldval = os.environ.get(name)
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)
        self.addCleanup(restore)


def self_test_suite() -> unittest.TestSuite:
    names = [
        "__init__",
        "errors",
        "log_utils",
        "varint",
    ]
    module_names = ["tests.test_" + name for name in names]
    loader = unittest.TestLoader()
    return loader.loadTestsFromNames(module_names)


def tutorial_test_suite() -> unittest.TestSuite:
    tutorial = [
        "introduction",
        "streams",
        "errors",
    ]
    tutorial_files = [f"../docs/tutorial/{name}.txt" for name in tutorial]

    return doctest.DocFileSuite(
        *tutorial_files,
        module_relative=True,
        package="tests",
        optionflags=doctest.ELLIPSIS,
    )


def test_suite() -> unittest.TestSuite:
    result = unittest.TestSuite()
    result.addTests(self_test_suite())
    result.addTests(tutorial_test_suite())
    return result
