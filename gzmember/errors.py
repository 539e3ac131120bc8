class GzMemberError(Exception):
    """Base class for gzmember errors."""


# Transport: the source failed or ran dry
class TransportError(GzMemberError):
    pass


class TruncatedHeaderError(TransportError, EOFError):
    def __init__(self, field: str, expected: int, got: int):
        super().__init__(f"Unexpected EOF reading {field}: wanted {expected} byte(s), got {got}")
        self.field = field
        self.expected = expected
        self.got = got


# Format: the bytes are not a valid member header
class FormatError(GzMemberError):
    pass


class InvalidMagic1(FormatError):
    def __init__(self, got: int):
        super().__init__(f"Bad magic byte 1: 0x{got:02x} (expected 0x1f)")
        self.got = got


class InvalidMagic2(FormatError):
    def __init__(self, got: int):
        super().__init__(f"Bad magic byte 2: 0x{got:02x} (expected 0x8b)")
        self.got = got


class HeaderChecksumMismatch(FormatError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Header CRC16 mismatch: stored 0x{expected:04x}, computed 0x{actual:04x}")
        self.expected = expected
        self.actual = actual
