"""
SEA decoder tests.unit
unit tests

(c) 2015--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import os
import sys

# make seadecode package accessible
HERE = os.path.dirname(os.path.abspath(__file__))
sys.path = [os.path.join(HERE, '..', '..')] + sys.path


# unittest verbosity, increase for more info on what is running
VERBOSITY = 1


def run_unit_tests():
    """Discover and run all unit tests."""
    import unittest
    sys.stderr.write('Running unit tests: ')
    suite = unittest.loader.defaultTestLoader.discover(
        HERE, 'test*.py', os.path.join(HERE, '..', '..')
    )
    runner = unittest.TextTestRunner(verbosity=VERBOSITY)
    return runner.run(suite)
