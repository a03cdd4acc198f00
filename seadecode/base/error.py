"""
SEA decoder - error.py
Exceptions

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""


class SeaError(Exception):
    """Base type for decoder exceptions."""

    message = u'Decoding error'

    def __init__(self, message=None):
        """Initialise with optional message, overriding the default."""
        if message is not None:
            self.message = message
        Exception.__init__(self, self.message)

    def __str__(self):
        """String representation of exception."""
        return self.message

    def __repr__(self):
        """Representation of exception."""
        return '<%s: %s>' % (type(self).__name__, self.message)


class FormatError(SeaError, ValueError):
    """Input data is malformed."""

    message = u'Malformed input'
