"""
SEA decoder - key.py
Encryption key derivation from file names

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import os
import logging
from collections import namedtuple


UINT32 = 0xFFFFFFFF


class EncryptionKey(namedtuple('EncryptionKey', ['seed0', 'seed1'])):
    """Pair of unsigned 32-bit seeds for the mask generator."""

    __slots__ = ()

    def __repr__(self):
        return 'EncryptionKey(seed0=0x%08X, seed1=0x%08X)' % self


def _fold(name):
    """Hash bytes with x*33 ^ c in 32-bit arithmetic."""
    seed = 0
    for char in name:
        # bytes are folded as signed chars: 0x80 and above are sign-extended
        if char >= 0x80:
            char = (char - 0x100) & UINT32
        seed = ((seed + (seed << 5)) ^ char) & UINT32
    return seed


def derive_key(filename):
    """
    Derive the encryption key from a file name.
    The name must be the bare file name with its original case and extension; any other
    name yields a valid but wrong key.
    """
    if isinstance(filename, str):
        filename = filename.encode('utf-8')
    filename = bytes(filename)
    key = EncryptionKey(_fold(reversed(filename)), _fold(filename))
    logging.debug('Derived key %r for file name %r', key, filename)
    return key


def key_for_path(path):
    """Derive the encryption key from the base name of a path."""
    return derive_key(os.path.basename(os.fspath(path)))
