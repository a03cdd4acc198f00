"""
SEA decoder - RollerCoaster Tycoon Classic encrypted file decoder

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .data import NAME, VERSION, AUTHOR, COPYRIGHT
from .base.error import SeaError, FormatError
from .cipher import EncryptionKey, derive_key, key_for_path
from .cipher import MASK_SIZE, MaskCache, create_mask
from .cipher import StreamDecoder, decrypt
from .sea import CHECKSUM_SIZE, split_checksum, decode_sea, read_sea, decode_sea_stream
from .main import main

__version__ = VERSION
