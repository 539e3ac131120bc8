from __future__ import annotations

import zlib
from typing import BinaryIO

from .constants import U16_STRUCT
from .errors import TransportError, TruncatedHeaderError


def read_exact(f: BinaryIO, n: int, field: str = "header") -> bytes:
    """Read exactly ``n`` bytes or raise.

    Raw streams (pipes, sockets) may hand back fewer bytes than asked for
    without being at EOF, so keep reading until the count is met or the
    source returns nothing.
    """
    buf = bytearray()
    while len(buf) < n:
        try:
            b = f.read(n - len(buf))
        except OSError as exc:
            raise TransportError(f"Read failed in {field}: {exc}") from exc
        if not b:
            raise TruncatedHeaderError(field, n, len(buf))
        buf += b
    return bytes(buf)


def read_u8(f: BinaryIO, field: str) -> int:
    return read_exact(f, 1, field)[0]


def read_u16le(f: BinaryIO, field: str) -> int:
    return U16_STRUCT.unpack(read_exact(f, U16_STRUCT.size, field))[0]


def read_cstring(f: BinaryIO, field: str) -> bytes:
    """Read up to the first zero byte; the zero is consumed but not returned.

    One byte per read so nothing past the terminator is taken from ``f``.
    """
    out = bytearray()
    while True:
        b = read_exact(f, 1, field)
        if b == b"\x00":
            return bytes(out)
        out += b


class RecordingSource:
    """Wraps a source and keeps a running CRC-32 and count of bytes read.

    Only ever forwards ``read``; it never buffers ahead of the caller.
    """

    def __init__(self, f: BinaryIO):
        self._f = f
        self.crc32 = 0
        self.consumed = 0

    def read(self, n: int = -1) -> bytes:
        b = self._f.read(n)
        if b:
            self.crc32 = zlib.crc32(b, self.crc32)
            self.consumed += len(b)
        return b

    def crc16(self) -> int:
        return self.crc32 & 0xFFFF
