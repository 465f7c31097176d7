#!/usr/bin/env python3
"""
WAD Header Inspector

Prints the type, lump count and directory offset of one or more WAD files,
and optionally the full lump directory. Files that fail to decode are
reported and skipped.

Usage:
    python wadheader.py <wad_file> [<wad_file> ...] [--lumps] [--format json]

Examples:
    python wadheader.py doom.wad
    python wadheader.py doom2.wad mm.wad --lumps
    python wadheader.py *.wad --format json
"""

import argparse
import json
import sys
from typing import List, Optional

from wad_data import Header, WadFormatError, read_header


def header_to_dict(path: str, header: Header, include_lumps: bool) -> dict:
    """JSON-ready summary of a decoded header."""
    result = {
        'file': path,
        'wad_type': header.wad_type.name,
        'lump_count': header.directory_entry_count,
        'directory_start': header.directory_start,
    }
    if include_lumps:
        result['lumps'] = [
            {'name': name, 'offset': lump.file_offset, 'size': lump.size}
            for name, lump in header.lumps
        ]
    return result


def print_header(header: Header, include_lumps: bool):
    print(f"  WAD type: {header.wad_type.name}")
    print(f"  # of lumps: {header.directory_entry_count}")
    print(f"  directory start: {header.directory_start}")

    if include_lumps:
        for index, (name, lump) in enumerate(header.lumps):
            print(f"  {index:5d}: {name:8} offset={lump.file_offset} size={lump.size}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Show header and directory information of WAD files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s doom.wad
  %(prog)s doom2.wad mm.wad --lumps
  %(prog)s *.wad --format json
        """
    )

    parser.add_argument(
        'wad_files',
        nargs='+',
        help='WAD files to inspect'
    )

    parser.add_argument(
        '--lumps', '-l',
        action='store_true',
        help='Also list every lump in the directory'
    )

    parser.add_argument(
        '--format', '-f',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )

    parser.add_argument(
        '--allow-empty-names',
        action='store_true',
        help='Accept lumps whose name field is all zero bytes'
    )

    args = parser.parse_args(argv)

    failures = 0
    results = []

    for path in args.wad_files:
        if args.format == 'text':
            print(f"WAD file: {path}")

        try:
            header = read_header(path, allow_empty_names=args.allow_empty_names)
        except (WadFormatError, OSError) as e:
            failures += 1
            if args.format == 'text':
                print(f"  Could not read WAD: {e}")
            else:
                results.append({'file': path, 'error': str(e)})
            continue

        if args.format == 'text':
            print_header(header, args.lumps)
        else:
            results.append(header_to_dict(path, header, args.lumps))

    if args.format == 'json':
        print(json.dumps(results, indent=2))

    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
