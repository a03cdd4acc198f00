"""
SEA decoder tests.utils
Shared testing utilities

(c) 2020--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import unittest
import os
import shutil
from unittest import main as run_tests

from seadecode.cipher import MASK_SIZE


class TestCase(unittest.TestCase):
    """Base class for test cases."""

    tag = None

    def __init__(self, *args, **kwargs):
        """Define output dir name."""
        unittest.TestCase.__init__(self, *args, **kwargs)
        here = os.path.dirname(os.path.abspath(__file__))
        self._dir = os.path.join(here, u'output', self.tag or u'')

    def setUp(self):
        """Ensure output directory exists and is empty."""
        try:
            shutil.rmtree(self._dir)
        except EnvironmentError:
            pass
        if not os.path.isdir(self._dir):
            os.makedirs(self._dir)

    def output_path(self, *names):
        """Output file name."""
        return os.path.join(self._dir, *names)

    def write_file(self, name, data):
        """Write bytes to a file in the output directory and return its path."""
        path = self.output_path(name)
        with open(path, 'wb') as f:
            f.write(data)
        return path


def encrypt(data, mask):
    """Inverse of the stream decryption, for building fixtures."""
    b = c = 0
    out = bytearray(len(data))
    for i, char in enumerate(data):
        a = b % MASK_SIZE
        c = c % MASK_SIZE
        b = (a + 1) % MASK_SIZE
        out[i] = (((char - mask[a]) ^ mask[c]) + mask[b]) & 0xFF
        c += 3
        b = a + 7
    return bytes(out)
