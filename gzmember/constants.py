import struct


# Magic
MAGIC1 = 0x1F
MAGIC2 = 0x8B

# Header flags (FLG byte)
FLAG_TEXT = 1 << 0
FLAG_HCRC = 1 << 1
FLAG_EXTRA = 1 << 2
FLAG_NAME = 1 << 3
FLAG_COMMENT = 1 << 4

FLAG_KNOWN_MASK = FLAG_TEXT | FLAG_HCRC | FLAG_EXTRA | FLAG_NAME | FLAG_COMMENT


# Compression method codes (CM byte); 0..7 are reserved
CM_DEFLATE = 0x08
CM_UNKNOWN = 0xFF

# Operating system codes (OS byte)
OS_UNKNOWN = 0xFF


# Fixed part of the header after the magic:
#  - cm u8
#  - flg u8
#  - mtime u32
#  - xfl u8
#  - os u8
FIXED_HEADER_STRUCT = struct.Struct("<BBIBB")

U16_STRUCT = struct.Struct("<H")


# Text fields (FNAME/FCOMMENT)
DEFAULT_TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"
