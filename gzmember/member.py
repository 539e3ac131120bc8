from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union

from .constants import DEFAULT_TEXT_ENCODING
from .header import Header, HeaderDecoder


class MemberReader:
    """Open a gzip member and decode its header.

    Accepts a filesystem path (str or os.PathLike) or an already-open binary
    file object. After ``open()`` the ``payload`` attribute is the underlying
    source, positioned at the first compressed byte; decompressing it and
    checking the trailer is left to the caller. Files opened here are closed
    by ``close()``; file objects handed in are left open. Calling ``open()``
    again after ``close()`` decodes afresh: a path is reopened from the start,
    a file object is read from wherever it now stands.
    """

    def __init__(
        self,
        source: Union[str, os.PathLike, BinaryIO],
        *,
        encoding: str = DEFAULT_TEXT_ENCODING,
        verify_header_crc: bool = False,
    ):
        self.source = source
        self.decoder = HeaderDecoder(encoding=encoding, verify_header_crc=verify_header_crc)
        self.f: Optional[BinaryIO] = None
        self.header: Optional[Header] = None
        self._owns_file = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self) -> Header:
        if self.header is not None:
            return self.header
        if isinstance(self.source, (str, os.PathLike)):
            self.f = open(self.source, "rb")
            self._owns_file = True
        else:
            self.f = self.source
        try:
            self.header = self.decoder.decode(self.f)
        except Exception:
            self.close()
            raise
        return self.header

    def close(self) -> None:
        if self.f is not None and self._owns_file:
            self.f.close()
        self.f = None
        self.header = None
        self._owns_file = False

    @property
    def payload(self) -> BinaryIO:
        if self.f is None or self.header is None:
            raise ValueError("Member is not open")
        return self.f

    @property
    def payload_offset(self) -> int:
        # Relative to where the source stood when open() was called
        if self.header is None:
            raise ValueError("Member is not open")
        return self.header.header_length
