"""
SEA decoder - cipher
Filename-keyed stream cipher used by RollerCoaster Tycoon Classic

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .key import EncryptionKey, derive_key, key_for_path
from .mask import MASK_SIZE, MaskCache, create_mask, rol32
from .stream import StreamDecoder, decrypt
