"""
SEA decoder - base
Shared definitions

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""
