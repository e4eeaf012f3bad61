#!/usr/bin/python3
# Setup file for uleb128
# Copyright (C) 2026 The uleb128 developers
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

from setuptools import setup

with open("README.rst", encoding="utf-8") as f:
    long_description = f.read()

fuzzing_require = ["atheris"]


setup(
    name="uleb128",
    version="0.1.0",
    description="Unsigned LEB128 encoding and decoding of 32-bit and 64-bit integers",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="Apache-2.0 OR GPL-2.0-or-later",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.10",
    packages=["uleb128"],
    package_data={"": ["py.typed"]},
    install_requires=[],
    extras_require={
        "fuzzing": fuzzing_require,
    },
)
