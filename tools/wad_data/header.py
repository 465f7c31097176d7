"""
WAD header and lump directory reader.

WAD files are the resource archives of Doom engine games. Only the header
and the directory are decoded here; lump data is never read.

Structure (all integers are signed 32-bit little-endian):
- Header (12 bytes): magic "IWAD" or "PWAD", lump count, directory offset
- Directory: one 16 byte entry per lump at the directory offset
    - file offset of the lump data
    - size of the lump data
    - 8 byte NUL padded name

Every offset and size is checked against the file size before it is
trusted, and the first problem found aborts the read.
"""

import os
import struct
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Dict, List, Optional, Tuple, Union

from .errors import (
    WadFormatError, TruncatedWadError,
    INVALID_TAG, NEGATIVE_ENTRY_COUNT, NEGATIVE_DIRECTORY_START,
    CANNOT_SEEK_DIRECTORY,
    NEGATIVE_LUMP_OFFSET, LUMP_OFFSET_TOO_LARGE,
    NEGATIVE_LUMP_SIZE, LUMP_SIZE_TOO_LARGE,
)
from .names import LUMP_NAME_SIZE, validate_lump_name, lump_name_text

__all__ = ['WadType', 'Lump', 'Header', 'WadHeaderReader', 'read_header']

WadSource = Union[str, bytes, os.PathLike, BinaryIO]


class WadType(Enum):
    """WAD flavour, taken from the magic tag."""
    IWAD = b'IWAD'  # Main game data, always required
    PWAD = b'PWAD'  # Patch loaded on top of an IWAD

    @classmethod
    def from_magic(cls, tag: bytes) -> 'WadType':
        for wad_type in cls:
            if wad_type.value == tag:
                return wad_type
        raise WadFormatError(INVALID_TAG, repr(bytes(tag)))


@dataclass(frozen=True)
class Lump:
    """Location of one lump's data inside the WAD."""
    file_offset: int
    size: int

    @property
    def end(self) -> int:
        """Offset one past the last byte of the lump."""
        return self.file_offset + self.size


@dataclass(frozen=True)
class Header:
    """
    Decoded WAD header and directory.

    ``lumps`` keeps the directory order and any duplicate names, which is
    how PWADs override lumps. Use ``directory`` or ``find`` for lookups by
    name; both resolve duplicates to the last entry.
    """
    wad_type: WadType
    directory_entry_count: int
    directory_start: int
    lumps: Tuple[Tuple[str, Lump], ...] = ()

    @property
    def directory(self) -> Dict[str, Lump]:
        """Name-keyed view of the directory, later entries win."""
        return {name: lump for name, lump in self.lumps}

    def names(self) -> List[str]:
        """Lump names in directory order."""
        return [name for name, _ in self.lumps]

    def find(self, name: str) -> Optional[Lump]:
        """Last lump called ``name``, or None."""
        for lump_name, lump in reversed(self.lumps):
            if lump_name == name:
                return lump
        return None


class WadHeaderReader:
    """
    Reader for the header and directory of a WAD file.

    Usage:
        with WadHeaderReader('/path/to/doom.wad') as reader:
            header = reader.read()

    A path is opened on ``open()`` and closed on ``close()``. An already
    open binary file may be passed instead; it is read from offset 0 and
    left open for its owner.
    """

    def __init__(self, source: WadSource, allow_empty_names: bool = False):
        """
        Initialize WAD header reader.

        Args:
            source: Path to the .wad file, or a seekable binary file object
            allow_empty_names: Accept all-NUL lump names instead of rejecting them
        """
        self.source = source
        self.allow_empty_names = allow_empty_names
        self.file_size = 0
        self._file: Optional[BinaryIO] = None
        self._owns_file = False

    def open(self):
        """Open the source and measure its size."""
        if isinstance(self.source, (str, bytes, os.PathLike)):
            self._file = open(self.source, 'rb')
            self._owns_file = True
        else:
            self._file = self.source
            self._owns_file = False

        try:
            self.file_size = self._file.seek(0, os.SEEK_END)
            self._file.seek(0)
        except BaseException:
            self.close()
            raise

    def close(self):
        """Release the source if this reader opened it."""
        if self._file is not None and self._owns_file:
            self._file.close()
        self._file = None
        self._owns_file = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *args):
        self.close()

    def _read_exact(self, count: int) -> bytes:
        offset = self._file.tell()
        data = self._file.read(count)
        if len(data) < count:
            raise TruncatedWadError(count, len(data), offset)
        return data

    def _read_i32_le(self) -> int:
        """Read little-endian signed 32-bit integer."""
        return struct.unpack('<i', self._read_exact(4))[0]

    def read(self) -> Header:
        """
        Decode the header and the full lump directory.

        Returns:
            Header with one (name, Lump) pair per directory entry

        Raises:
            WadFormatError: If the header or any directory entry is invalid
            OSError: If the file cannot be read, including TruncatedWadError
        """
        if self._file is None:
            raise ValueError("WAD source is not open")

        self._file.seek(0)
        wad_type = WadType.from_magic(self._read_exact(4))

        entry_count = self._read_i32_le()
        if entry_count < 0:
            raise WadFormatError(NEGATIVE_ENTRY_COUNT, str(entry_count))

        directory_start = self._read_i32_le()
        if directory_start < 0:
            raise WadFormatError(NEGATIVE_DIRECTORY_START, str(directory_start))
        if directory_start > self.file_size:
            raise WadFormatError(
                CANNOT_SEEK_DIRECTORY,
                f"{directory_start} > file size {self.file_size}"
            )

        if self._file.seek(directory_start) != directory_start:
            raise WadFormatError(CANNOT_SEEK_DIRECTORY, str(directory_start))

        lumps = []
        for _ in range(entry_count):
            lumps.append(self._read_entry())

        return Header(
            wad_type=wad_type,
            directory_entry_count=entry_count,
            directory_start=directory_start,
            lumps=tuple(lumps),
        )

    def _read_entry(self) -> Tuple[str, Lump]:
        """Read and check the directory entry at the current position."""
        file_offset = self._read_i32_le()
        if file_offset < 0:
            raise WadFormatError(NEGATIVE_LUMP_OFFSET, str(file_offset))
        if file_offset > self.file_size:
            raise WadFormatError(
                LUMP_OFFSET_TOO_LARGE,
                f"{file_offset} > file size {self.file_size}"
            )

        size = self._read_i32_le()
        if size < 0:
            raise WadFormatError(NEGATIVE_LUMP_SIZE, str(size))
        # Python ints do not overflow, so the sum is exact for any i32 pair
        if file_offset + size > self.file_size:
            raise WadFormatError(
                LUMP_SIZE_TOO_LARGE,
                f"{file_offset} + {size} > file size {self.file_size}"
            )

        raw_name = self._read_exact(LUMP_NAME_SIZE)
        validate_lump_name(raw_name, allow_empty=self.allow_empty_names)

        return lump_name_text(raw_name), Lump(file_offset=file_offset, size=size)


def read_header(source: WadSource, allow_empty_names: bool = False) -> Header:
    """
    Read header and directory information from a WAD file.

    Args:
        source: Path to the .wad file, or a seekable binary file object
        allow_empty_names: Accept all-NUL lump names instead of rejecting them

    Returns:
        The decoded Header

    Raises:
        WadFormatError: If an inconsistency is detected
        OSError: If the file cannot be opened or ends early
    """
    with WadHeaderReader(source, allow_empty_names=allow_empty_names) as reader:
        return reader.read()
