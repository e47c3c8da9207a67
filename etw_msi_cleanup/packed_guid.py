"""
Conversion between GUIDs and the packed form Windows Installer uses
for key names under its registry tables

The packed form is the GUID's mixed-endian byte array (as returned by
UUID.bytes_le) written out as hex, one byte at a time, low nibble
first.  So the byte 0x1A becomes 'A1'.
"""

import string
import uuid

from etw_msi_cleanup import constants
from etw_msi_cleanup.exceptions import PreconditionError


HEX_SYMBOLS = '0123456789ABCDEF'


def encode(guid):
    """Return the packed registry form of a UUID"""

    return ''.join(
        HEX_SYMBOLS[b & 0xF] + HEX_SYMBOLS[b >> 4] for b in guid.bytes_le
    )


def decode(packed):
    """Return the UUID for a packed registry key name"""

    if len(packed) != 32:
        raise ValueError(f'Packed GUID must be 32 characters: {packed!r}')

    if any(c not in string.hexdigits for c in packed):
        raise ValueError(f'Packed GUID is not hexadecimal: {packed!r}')

    data = bytes(
        int(packed[i + 1] + packed[i], 16) for i in range(0, 32, 2)
    )

    return uuid.UUID(bytes_le=data)


def self_check():
    """
    Verify the well-known identifiers still pack to the strings the
    registry is expected to contain; any mismatch means the encoding
    or the constants changed and nothing may be deleted
    """

    checks = [
        (constants.MASTER_UPGRADE_CODE, constants.MASTER_UPGRADE_CODE_PACKED),
        (constants.SERVICE_OLD_COMPONENT,
         constants.SERVICE_OLD_COMPONENT_PACKED),
    ]

    for guid, expected in checks:
        packed = encode(guid)

        if packed != expected or decode(packed) != guid:
            raise PreconditionError('Failed.')
