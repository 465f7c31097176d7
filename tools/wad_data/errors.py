"""
Exceptions raised while decoding a WAD header.

Two kinds of failure are kept apart:
- WadFormatError: the bytes were readable but break the WAD layout rules
- TruncatedWadError: the stream ended before a field could be read

Failures to open the file surface as the usual OSError subclasses, so
every I/O problem can be caught with a single ``except OSError``.
"""

from typing import Optional

__all__ = [
    'WadFormatError', 'TruncatedWadError',
    'INVALID_TAG', 'NEGATIVE_ENTRY_COUNT', 'NEGATIVE_DIRECTORY_START',
    'CANNOT_SEEK_DIRECTORY',
    'NEGATIVE_LUMP_OFFSET', 'LUMP_OFFSET_TOO_LARGE',
    'NEGATIVE_LUMP_SIZE', 'LUMP_SIZE_TOO_LARGE',
    'EMPTY_LUMP_NAME', 'NON_ZERO_AFTER_ZERO', 'INVALID_NAME_CHARACTER',
]


# Header
INVALID_TAG = 'invalid WAD tag'
NEGATIVE_ENTRY_COUNT = 'directory entry count is negative'
NEGATIVE_DIRECTORY_START = 'directory start is negative'
CANNOT_SEEK_DIRECTORY = 'cannot seek to directory start'

# Directory entries
NEGATIVE_LUMP_OFFSET = 'lump start pointer is negative'
LUMP_OFFSET_TOO_LARGE = 'lump start pointer is too large'
NEGATIVE_LUMP_SIZE = 'lump size is negative'
LUMP_SIZE_TOO_LARGE = 'lump size is too large'

# Lump names
EMPTY_LUMP_NAME = 'empty lump name'
NON_ZERO_AFTER_ZERO = 'non-0 after 0 character in lump name'
INVALID_NAME_CHARACTER = 'invalid character in lump name'


class WadFormatError(ValueError):
    """The WAD was fully readable but its header or directory is invalid."""

    def __init__(self, reason: str, detail: Optional[str] = None):
        self.reason = reason
        self.detail = detail
        message = f"{reason}: {detail}" if detail else reason
        super().__init__(message)


class TruncatedWadError(OSError):
    """The stream ended before the requested number of bytes was read."""

    def __init__(self, expected: int, actual: int, offset: int):
        self.expected = expected
        self.actual = actual
        self.offset = offset
        super().__init__(
            f"unexpected end of file at offset {offset}: "
            f"wanted {expected} bytes, got {actual}"
        )
