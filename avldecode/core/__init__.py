from avldecode.core.binary import ByteCursor, bytes_to_int, get_bit
from avldecode.core.errors import (
    BufferUnderrun,
    DecodeError,
    MalformedCount,
    RecordCountMismatch,
    UnknownCodec,
    UnsupportedCodec,
)

__all__ = [
    "BufferUnderrun",
    "ByteCursor",
    "DecodeError",
    "MalformedCount",
    "RecordCountMismatch",
    "UnknownCodec",
    "UnsupportedCodec",
    "bytes_to_int",
    "get_bit",
]
