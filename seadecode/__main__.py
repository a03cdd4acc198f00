"""
SEA decoder - __main__
Command-line entry point

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .main import main

main()
