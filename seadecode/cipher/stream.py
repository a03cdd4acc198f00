"""
SEA decoder - stream.py
Rolling-index stream decryption

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .mask import MASK_SIZE


class StreamDecoder(object):
    """Decrypt a byte stream in consecutive chunks with one mask."""

    def __init__(self, mask):
        """Initialise decoder at the start of the stream."""
        if len(mask) != MASK_SIZE:
            raise ValueError('mask must be %d bytes, got %d' % (MASK_SIZE, len(mask)))
        self._mask = bytes(mask)
        # index accumulators, not reduced between bytes
        self._b = 0
        self._c = 0
        self.offset = 0

    def decode(self, data):
        """Decrypt the next chunk of the stream."""
        mask = self._mask
        b, c = self._b, self._c
        out = bytearray(len(data))
        for i, char in enumerate(data):
            a = b % MASK_SIZE
            c = c % MASK_SIZE
            b = (a + 1) % MASK_SIZE
            out[i] = (((char - mask[b]) ^ mask[c]) + mask[a]) & 0xFF
            c += 3
            b = a + 7
        self._b, self._c = b, c
        self.offset += len(out)
        return bytes(out)


def decrypt(data, mask):
    """Decrypt a complete buffer."""
    return StreamDecoder(mask).decode(data)
