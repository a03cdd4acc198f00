#!/usr/bin/env python3
"""
SEA decoder install script

(c) 2015--2026 Rob Hagemans
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
with open(os.path.join(HERE, 'seadecode', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='seadecode',
    version=VERSION,
    author=AUTHOR,
    description='Decoder for RollerCoaster Tycoon Classic encrypted (.sea) files',
    license='GPLv3+',
    python_requires='>=3.9',

    # contents
    # only include subpackages of seadecode: exclude tests
    packages=find_packages(include=['seadecode', 'seadecode.*']),
    package_data={
        'seadecode.data': ['*.json', '*.txt'],
    },
    install_requires=[],
    extras_require=dict(
        test=['coverage'],
    ),
    # launchers
    entry_points=dict(
        console_scripts=['seadecode=seadecode:main'],
    ),
)

###############################################################################
# run the setup

# perform the installation
setup(**SETUP_OPTIONS)
