"""
WAD Header Library

A Python library for reading the header and lump directory of Doom engine
WAD archives (IWAD and PWAD). Lump data itself is never read; each lump is
described by its name, file offset and size.

Simple Usage:
    from wad_data import read_header

    header = read_header('/path/to/doom.wad')
    print(header.wad_type, header.directory_entry_count)
    for name, lump in header.lumps:
        print(f"{name:8} {lump.file_offset:10} {lump.size:10}")

    # Or use the convenience functions
    from wad_data import lump_directory

    for name, offset, size in lump_directory('/path/to/doom.wad'):
        print(name, offset, size)

Errors:
    WadFormatError is raised for structurally invalid files. Anything that
    goes wrong while reading, including a file that ends early, is an OSError.
"""

from typing import List, Tuple

from .errors import WadFormatError, TruncatedWadError
from .names import LUMP_NAME_SIZE, LUMP_NAME_CHARS, validate_lump_name, lump_name_text
from .header import WadType, Lump, Header, WadHeaderReader, read_header

__all__ = [
    # Errors
    'WadFormatError',
    'TruncatedWadError',

    # Lump names
    'LUMP_NAME_SIZE',
    'LUMP_NAME_CHARS',
    'validate_lump_name',
    'lump_name_text',

    # Header and directory
    'WadType',
    'Lump',
    'Header',
    'WadHeaderReader',
    'read_header',

    # Convenience functions
    'lump_directory',
]

__version__ = '1.0.0'


def lump_directory(wad_path: str) -> List[Tuple[str, int, int]]:
    """
    Convenience function to list a WAD's directory.

    Args:
        wad_path: Path to the .wad file

    Returns:
        List of (name, file_offset, size) tuples in directory order
    """
    header = read_header(wad_path)
    return [(name, lump.file_offset, lump.size) for name, lump in header.lumps]
