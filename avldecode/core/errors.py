"""
Exception hierarchy for AVL packet decoding.

Every failure raised while decoding derives from ``DecodeError`` (itself a
``ValueError``), so callers can catch one type for any malformed input.
"""
from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Base class for all packet decoding failures."""


class BufferUnderrun(DecodeError):
    """A read would run past the end of the buffer."""

    def __init__(
        self,
        offset: int,
        requested: int,
        available: int,
        field: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        self.offset = offset
        self.requested = requested
        self.available = available
        self.field = field
        if message is None:
            where = f" reading {field}" if field else ""
            message = (
                f"Buffer underrun{where} at offset {offset}: "
                f"requested {requested} byte(s), {available} available"
            )
        super().__init__(message)


class MalformedCount(BufferUnderrun):
    """A declared count implies more data than the buffer holds."""

    def __init__(self, field: str, count: int, offset: int, requested: int, available: int) -> None:
        self.count = count
        super().__init__(
            offset,
            requested,
            available,
            field=field,
            message=(
                f"Declared {field} of {count} needs {requested} byte(s) at offset {offset}, "
                f"only {available} available"
            ),
        )


class UnknownCodec(DecodeError):
    def __init__(self, codec_id: int) -> None:
        self.codec_id = codec_id
        super().__init__(f"Unknown codec id {codec_id}")


class UnsupportedCodec(DecodeError):
    def __init__(self, codec_id: int) -> None:
        self.codec_id = codec_id
        super().__init__(f"Codec {codec_id} is recognised but not supported")


class RecordCountMismatch(DecodeError):
    def __init__(self, declared: int, echoed: int) -> None:
        self.declared = declared
        self.echoed = echoed
        super().__init__(f"Record count mismatch: header declares {declared}, footer echoes {echoed}")


__all__ = [
    "BufferUnderrun",
    "DecodeError",
    "MalformedCount",
    "RecordCountMismatch",
    "UnknownCodec",
    "UnsupportedCodec",
]
