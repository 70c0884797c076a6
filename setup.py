#!/usr/bin/env python3
"""
decfloat install script

(c) 2015--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package (to avoid breaking sdist install)
with open(os.path.join(HERE, 'decfloat', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='decfloat',
    version=VERSION,
    author=AUTHOR,
    description='Arbitrary-precision decimal numbers',
    license='GPLv3+',
    python_requires='>=3.9',

    # contents
    # only include decfloat and its subpackages: exclude tests etc
    packages=find_packages(include=['decfloat', 'decfloat.*']),
    package_data={'decfloat.data': ['meta.json', 'USAGE.txt']},
    # launchers
    entry_points=dict(
        console_scripts=['decfloat=decfloat.main:main'],
    ),
)

###############################################################################
# run the setup

setup(**SETUP_OPTIONS)
