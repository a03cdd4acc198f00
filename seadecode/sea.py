"""
SEA decoder - sea.py
RollerCoaster Tycoon Classic encrypted save and scenario files

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.

A .sea file is the encrypted body followed by a 4-byte little-endian checksum.
The key is derived from the file name, so a renamed file will not decode.
"""

import io
import os
import struct
import logging

from .base.error import FormatError
from .cipher import derive_key, create_mask, StreamDecoder, decrypt


# trailing checksum field
CHECKSUM_SIZE = 4
_CHECKSUM = struct.Struct('<I')

# default chunk size for stream decoding
CHUNK_SIZE = 0x10000


def split_checksum(data):
    """Separate the body from the stored checksum."""
    if len(data) < CHECKSUM_SIZE:
        raise FormatError(
            u'Input too short: %d bytes, need at least %d for checksum' % (len(data), CHECKSUM_SIZE)
        )
    body = bytes(data[:-CHECKSUM_SIZE])
    checksum, = _CHECKSUM.unpack(bytes(data[-CHECKSUM_SIZE:]))
    return body, checksum


def _get_mask(filename, cache):
    """Get mask from cache, or generate it."""
    if cache is not None:
        return cache.get(filename)
    return create_mask(derive_key(filename))


def decode_sea(filename, data, cache=None):
    """Decrypt the contents of a .sea file, given its file name."""
    body, checksum = split_checksum(data)
    logging.debug('Decoding %d bytes for %r, stored checksum 0x%08X', len(body), filename, checksum)
    # the checksum is not verified
    return decrypt(body, _get_mask(filename, cache))


def read_sea(path, cache=None, name=None):
    """Read and decrypt a .sea file; the key is taken from the base name unless name is given."""
    if name is None:
        name = os.path.basename(os.fspath(path))
    with io.open(path, 'rb') as f:
        data = f.read()
    return decode_sea(name, data, cache)


def decode_sea_stream(filename, instream, outstream, cache=None, chunk_size=CHUNK_SIZE):
    """Decrypt from a binary input stream to a binary output stream; return stored checksum."""
    if chunk_size < 1:
        raise ValueError('chunk_size must be positive, got %r' % (chunk_size,))
    decoder = StreamDecoder(_get_mask(filename, cache))
    # hold back the last bytes read, as they may be the checksum
    held = b''
    while True:
        chunk = instream.read(chunk_size)
        if not chunk:
            break
        held += chunk
        if len(held) > CHECKSUM_SIZE:
            outstream.write(decoder.decode(held[:-CHECKSUM_SIZE]))
            held = held[-CHECKSUM_SIZE:]
    if len(held) < CHECKSUM_SIZE:
        raise FormatError(
            u'Input too short: %d bytes, need at least %d for checksum'
            % (decoder.offset + len(held), CHECKSUM_SIZE)
        )
    checksum, = _CHECKSUM.unpack(held)
    logging.debug(
        'Decoded %d bytes for %r, stored checksum 0x%08X', decoder.offset, filename, checksum
    )
    return checksum
