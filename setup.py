#!/usr/bin/env python3
#  Copyright (c) 2019-2023 SRI International.
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from setuptools import setup, find_packages
from pathlib import Path

vfile = Path(__file__).parent / "VERSION"
VERSION = vfile.read_text().strip()

setup(
    name='intgcd',
    version=VERSION,
    scripts=["bin/intgcd"],
    packages=find_packages(include=['intgcd', 'intgcd.*']),
    python_requires='>=3.8',
    install_requires=[
        'structlog>=22.1',
        'dynaconf>=3.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
