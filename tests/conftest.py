import struct
from pathlib import Path
from typing import List, Optional, Tuple

import pytest


def build_wad(entries: List[Tuple[int, int, bytes]] = (),
              magic: bytes = b'PWAD',
              payload: bytes = b'',
              count: Optional[int] = None,
              directory_start: Optional[int] = None,
              trailer: bytes = b'') -> bytes:
    """
    Assemble a WAD image: 12 byte header, payload, then the directory.

    ``count`` and ``directory_start`` default to the values matching the
    entries actually written; pass them explicitly to build broken files.
    """
    if count is None:
        count = len(entries)
    if directory_start is None:
        directory_start = 12 + len(payload)

    data = bytearray(magic)
    data += struct.pack('<ii', count, directory_start)
    data += payload
    for offset, size, name in entries:
        data += struct.pack('<ii8s', offset, size, name)
    data += trailer
    return bytes(data)


@pytest.fixture
def wad_file(tmp_path: Path):
    """Write a WAD image to a temporary file and return its path."""
    def _write(data: bytes, name: str = 'test.wad') -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
