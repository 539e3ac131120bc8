from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import BinaryIO, Optional

from .constants import (
    DEFAULT_TEXT_ENCODING,
    FIXED_HEADER_STRUCT,
    MAGIC1,
    MAGIC2,
    TEXT_ERRORS,
)
from .errors import HeaderChecksumMismatch, InvalidMagic1, InvalidMagic2
from .fields import CompressionMethod, HeaderFlags, OperatingSystem
from .source import RecordingSource, read_cstring, read_exact, read_u8, read_u16le


@dataclass(frozen=True)
class ExtraField:
    subfield_id1: int
    subfield_id2: int
    length: int
    data: bytes

    @property
    def subfield_id(self) -> bytes:
        return bytes((self.subfield_id1, self.subfield_id2))


@dataclass(frozen=True)
class Header:
    magic1: int
    magic2: int
    compression_method: CompressionMethod
    flags: HeaderFlags
    modification_time: int
    extra_flags: int
    operating_system: OperatingSystem
    extra_field: Optional[ExtraField] = None
    original_file_name: Optional[str] = None
    comment: Optional[str] = None
    header_checksum: Optional[int] = None
    header_length: int = 0

    @property
    def mtime_datetime(self) -> Optional[datetime]:
        # 0 means no timestamp was recorded
        if self.modification_time == 0:
            return None
        return datetime.fromtimestamp(self.modification_time, tz=timezone.utc)


def check_text_encoding(encoding: str) -> None:
    """Raise ValueError unless ``encoding`` can turn bytes into str."""
    try:
        b"".decode(encoding, TEXT_ERRORS)
    except LookupError as exc:
        raise ValueError(f"Unusable text encoding {encoding!r}: {exc}") from exc


class HeaderDecoder:
    """Decode one gzip member header from a sequential byte source.

    The decoder keeps no state between calls. ``decode`` reads exactly the
    bytes that make up the header and nothing more, so on return the source
    is positioned at the first byte of the compressed payload. It never seeks,
    which makes pipes and sockets valid sources.

    Args:
        encoding: Codec for the name and comment fields. Undecodable bytes are
            replaced rather than raising. Codecs that are not text codecs
            (unknown names, or bytes-to-bytes codecs like "hex") raise
            ValueError here, before any byte is read.
        verify_header_crc: When True and the HCRC flag is set, check the stored
            CRC16 against the bytes that preceded it.
    """

    def __init__(self, encoding: str = DEFAULT_TEXT_ENCODING, verify_header_crc: bool = False):
        check_text_encoding(encoding)
        self.encoding = encoding
        self.verify_header_crc = verify_header_crc

    def decode(self, f: BinaryIO) -> Header:
        src = RecordingSource(f)

        magic1 = read_u8(src, "magic1")
        if magic1 != MAGIC1:
            raise InvalidMagic1(magic1)
        magic2 = read_u8(src, "magic2")
        if magic2 != MAGIC2:
            raise InvalidMagic2(magic2)

        cm, flg, mtime, xfl, os_code = FIXED_HEADER_STRUCT.unpack(
            read_exact(src, FIXED_HEADER_STRUCT.size, "fixed header")
        )
        flags = HeaderFlags(flg)

        # Optional fields, in the order the format lays them out
        extra_field = None
        if flags.extra:
            si1 = read_u8(src, "extra subfield id")
            si2 = read_u8(src, "extra subfield id")
            xlen = read_u16le(src, "extra length")
            data = read_exact(src, xlen, "extra data")
            extra_field = ExtraField(subfield_id1=si1, subfield_id2=si2, length=xlen, data=data)

        original_file_name = None
        if flags.name:
            original_file_name = self._text(read_cstring(src, "file name"))

        comment = None
        if flags.comment:
            comment = self._text(read_cstring(src, "comment"))

        header_checksum = None
        if flags.hcrc:
            computed = src.crc16()
            header_checksum = read_u16le(src, "header checksum")
            if self.verify_header_crc and computed != header_checksum:
                raise HeaderChecksumMismatch(header_checksum, computed)

        return Header(
            magic1=magic1,
            magic2=magic2,
            compression_method=CompressionMethod(cm),
            flags=flags,
            modification_time=mtime,
            extra_flags=xfl,
            operating_system=OperatingSystem(os_code),
            extra_field=extra_field,
            original_file_name=original_file_name,
            comment=comment,
            header_checksum=header_checksum,
            header_length=src.consumed,
        )

    def _text(self, raw: bytes) -> str:
        return raw.decode(self.encoding, errors=TEXT_ERRORS)


def read_header(f: BinaryIO, *, encoding: str = DEFAULT_TEXT_ENCODING, verify_header_crc: bool = False) -> Header:
    return HeaderDecoder(encoding=encoding, verify_header_crc=verify_header_crc).decode(f)
