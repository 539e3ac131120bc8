"""
gzmember: strict decoder for gzip member headers (RFC 1952).

- Fixed header: magic, compression method, flags, mtime, extra flags, OS
- Optional fields gated by the flags byte: extra field, file name, comment,
  header CRC16 (with optional verification)
- Reads a sequential source byte-exactly and leaves it at the first payload
  byte; decompression and trailer checks belong to the caller
- ``gzmember inspect`` CLI for looking at headers of files or stdin

Format errors (bad magic, CRC mismatch) and transport errors (short read,
I/O failure) are separate exception families in gzmember.errors.
"""

__version__ = "0.1"

from .errors import (
    GzMemberError,
    TransportError,
    TruncatedHeaderError,
    FormatError,
    InvalidMagic1,
    InvalidMagic2,
    HeaderChecksumMismatch,
)
from .fields import CompressionMethod, OperatingSystem, HeaderFlags
from .header import ExtraField, Header, HeaderDecoder, read_header
from .member import MemberReader

__all__ = [
    "GzMemberError",
    "TransportError",
    "TruncatedHeaderError",
    "FormatError",
    "InvalidMagic1",
    "InvalidMagic2",
    "HeaderChecksumMismatch",
    "CompressionMethod",
    "OperatingSystem",
    "HeaderFlags",
    "ExtraField",
    "Header",
    "HeaderDecoder",
    "read_header",
    "MemberReader",
]
