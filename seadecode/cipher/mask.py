"""
SEA decoder - mask.py
Keystream (mask) generation

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import logging
import threading
from collections import OrderedDict
from itertools import islice

from .key import derive_key, UINT32


# length of the mask in bytes
MASK_SIZE = 0x1000

# constant mixed into the second seed on every round
SEED1_XOR = 0xF7654321


def rol32(value, count):
    """Rotate a 32-bit word left."""
    value &= UINT32
    return ((value << count) | (value >> (32 - count))) & UINT32


def _iter_mask(key):
    """Generate the infinite stream of mask bytes, four per round."""
    seed0, seed1 = key
    while True:
        s0 = seed0
        s1 = seed1 ^ SEED1_XOR
        seed0 = (rol32(s1, 25) + s0) & UINT32
        seed1 = rol32(s0, 29)
        # first three bytes come from the old seed0, the last from the new seed1
        yield (s0 >> 3) & 0xFF
        yield (s0 >> 11) & 0xFF
        yield (s0 >> 19) & 0xFF
        yield (seed1 >> 24) & 0xFF


def create_mask(key):
    """Generate the 4096-byte mask for an encryption key."""
    return bytes(islice(_iter_mask(key), MASK_SIZE))


class MaskCache(object):
    """Masks by file name, for repeated decoding of files with the same name.

    With max_size set, entries are evicted first in, first out; a cache hit does not
    refresh an entry.
    """

    def __init__(self, max_size=None):
        """Initialise empty cache; max_size=None means unbounded."""
        if max_size is not None and max_size < 1:
            raise ValueError('max_size must be positive, got %r' % (max_size,))
        self._max_size = max_size
        self._masks = OrderedDict()
        self._lock = threading.Lock()

    def get(self, filename):
        """Retrieve the mask for a file name, creating it if needed."""
        try:
            mask = self._masks[filename]
        except KeyError:
            pass
        else:
            logging.debug('Mask cache hit for %r', filename)
            return mask
        logging.debug('Mask cache miss for %r', filename)
        mask = create_mask(derive_key(filename))
        with self._lock:
            # another thread may have stored the same mask meanwhile; masks are equal
            self._masks[filename] = mask
            if self._max_size is not None:
                while len(self._masks) > self._max_size:
                    self._masks.popitem(last=False)
        return mask

    def clear(self):
        """Drop all cached masks."""
        with self._lock:
            self._masks.clear()

    def __contains__(self, filename):
        return filename in self._masks

    def __len__(self):
        return len(self._masks)
