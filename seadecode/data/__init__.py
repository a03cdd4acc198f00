"""
SEA decoder - data
Package metadata

(c) 2021--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import json
from importlib import resources


def read_binary(name):
    """Read a data file bundled with the package."""
    return resources.files(__package__).joinpath(name).read_bytes()

def read_text(name):
    """Read a text file bundled with the package."""
    return read_binary(name).decode('utf-8', 'replace')


# copyright metadata
_METADATA = json.loads(read_binary('meta.json'))
NAME, VERSION, AUTHOR, COPYRIGHT = (_METADATA[_key] for _key in (
    'name', 'version', 'author', 'copyright'
))
