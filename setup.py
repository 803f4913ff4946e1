#!/usr/bin/env python
"""
Copyright 2019 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# read the version without importing the package, its dependencies may not be installed yet
_version_file = Path(__file__).parent / 'tagtree' / 'version.py'
_match = re.search(r"^BASE_VERSION = '([^']+)'", _version_file.read_text(), re.M)
assert _match is not None
__version__ = _match.group(1)

setup(
    name='tagtree',
    version=__version__,
    description='Encoder for NBT, the named binary tag format',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*')),
    package_data={
        'tagtree.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2,<3',
        'pyyaml>=6',
        'structlog>=22',
        'typing-extensions>=4.6',
    ],
    extras_require={
        'test': [
            'pytest>=7',
        ],
    },
)
