from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .constants import (
    CM_DEFLATE,
    CM_UNKNOWN,
    FLAG_COMMENT,
    FLAG_EXTRA,
    FLAG_HCRC,
    FLAG_KNOWN_MASK,
    FLAG_NAME,
    FLAG_TEXT,
    OS_UNKNOWN,
)


class CompressionMethod(IntEnum):
    RESERVED0 = 0x00
    RESERVED1 = 0x01
    RESERVED2 = 0x02
    RESERVED3 = 0x03
    RESERVED4 = 0x04
    RESERVED5 = 0x05
    RESERVED6 = 0x06
    RESERVED7 = 0x07
    DEFLATE = CM_DEFLATE
    UNKNOWN = CM_UNKNOWN

    @classmethod
    def _missing_(cls, value):
        # Codes outside the table are legal; they just have no name yet.
        return cls.UNKNOWN


class OperatingSystem(IntEnum):
    FAT = 0x00
    AMIGA = 0x01
    VMS = 0x02
    UNIX = 0x03
    VM_CMS = 0x04
    ATARI_TOS = 0x05
    HPFS = 0x06
    MACINTOSH = 0x07
    Z_SYSTEM = 0x08
    CPM = 0x09
    TOPS20 = 0x0A
    NTFS = 0x0B
    QDOS = 0x0C
    ACORN_RISCOS = 0x0D
    UNKNOWN = OS_UNKNOWN

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


@dataclass(frozen=True)
class HeaderFlags:
    """The FLG byte, kept whole.

    Bits 5-7 are reserved by the format. They are carried in ``value`` and
    exposed through ``reserved`` but never cause a decode to fail.
    """

    value: int = 0

    def __post_init__(self):
        if not 0 <= self.value <= 0xFF:
            raise ValueError("flags must fit in one byte")

    @property
    def text(self) -> bool:
        return bool(self.value & FLAG_TEXT)

    @property
    def hcrc(self) -> bool:
        return bool(self.value & FLAG_HCRC)

    @property
    def extra(self) -> bool:
        return bool(self.value & FLAG_EXTRA)

    @property
    def name(self) -> bool:
        return bool(self.value & FLAG_NAME)

    @property
    def comment(self) -> bool:
        return bool(self.value & FLAG_COMMENT)

    @property
    def reserved(self) -> int:
        return self.value & ~FLAG_KNOWN_MASK & 0xFF

    def names(self) -> list:
        out = []
        for label, bit in (
            ("TEXT", FLAG_TEXT),
            ("HCRC", FLAG_HCRC),
            ("EXTRA", FLAG_EXTRA),
            ("NAME", FLAG_NAME),
            ("COMMENT", FLAG_COMMENT),
        ):
            if self.value & bit:
                out.append(label)
        return out
