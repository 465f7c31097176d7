"""
Lump name checks.

A lump name is stored as an 8 byte field. Names shorter than 8 characters
are padded with NUL bytes; once padding starts every remaining byte must be
NUL. Only upper case letters, digits and the characters ``[ ] - _ \\`` may
appear in a name.
"""

from .errors import (
    WadFormatError,
    EMPTY_LUMP_NAME, NON_ZERO_AFTER_ZERO, INVALID_NAME_CHARACTER,
)

__all__ = ['LUMP_NAME_SIZE', 'LUMP_NAME_CHARS', 'validate_lump_name', 'lump_name_text']

LUMP_NAME_SIZE = 8

LUMP_NAME_CHARS = frozenset(
    b'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    b'0123456789'
    b'[]-_\\'
)


def validate_lump_name(raw: bytes, allow_empty: bool = False) -> None:
    """
    Check an 8 byte lump name field.

    Args:
        raw: The raw name field from a directory entry
        allow_empty: Accept a field made only of NUL bytes

    Raises:
        WadFormatError: If the name is empty or malformed
        ValueError: If ``raw`` is not exactly 8 bytes long
    """
    if len(raw) != LUMP_NAME_SIZE:
        raise ValueError(f"Lump name field must be {LUMP_NAME_SIZE} bytes, got {len(raw)}")

    for index, byte in enumerate(raw):
        if byte in LUMP_NAME_CHARS:
            continue

        if byte == 0:
            if index == 0 and not allow_empty:
                raise WadFormatError(EMPTY_LUMP_NAME, repr(bytes(raw)))
            for rest in range(index + 1, LUMP_NAME_SIZE):
                if raw[rest] != 0:
                    raise WadFormatError(
                        NON_ZERO_AFTER_ZERO,
                        f"{bytes(raw)!r} has byte {raw[rest]:#04x} at index {rest}"
                    )
            return

        raise WadFormatError(
            INVALID_NAME_CHARACTER,
            f"{bytes(raw)!r} has byte {byte:#04x} at index {index}"
        )


def lump_name_text(raw: bytes) -> str:
    """Printable form of a name field: NUL padding removed, undecodable bytes replaced."""
    return bytes(raw).rstrip(b'\x00').decode('ascii', errors='replace')
