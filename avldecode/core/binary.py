"""
Forward-only, bounds-checked reader over an AVL packet buffer.

All multi-byte values on the wire are big-endian (network byte order).
"""
from __future__ import annotations

import struct
from typing import Optional

from avldecode.core.errors import BufferUnderrun, MalformedCount

_UINT8 = struct.Struct(">B")
_INT8 = struct.Struct(">b")
_UINT16 = struct.Struct(">H")
_INT16 = struct.Struct(">h")
_UINT32 = struct.Struct(">I")
_INT32 = struct.Struct(">i")
_UINT64 = struct.Struct(">Q")
_FLOAT64 = struct.Struct(">d")


class ByteCursor:
    """
    Sequential big-endian reader that tracks its own position.

    A read that would run past the end raises ``BufferUnderrun`` and leaves
    the position unchanged.

    Args:
        data: The complete packet buffer.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def __len__(self) -> int:
        return len(self._data)

    def require(self, size: int, field: Optional[str] = None) -> None:
        """Raise ``BufferUnderrun`` unless ``size`` more bytes are available."""
        if size < 0 or size > self.remaining:
            raise BufferUnderrun(self._pos, size, self.remaining, field=field)

    def require_count(self, count: int, width: int, field: str, reserve: int = 0) -> None:
        """
        Check that ``count`` items of ``width`` bytes (plus ``reserve``
        trailing bytes) fit in the rest of the buffer.

        Raises:
            MalformedCount: If the declared count cannot possibly be satisfied.
        """
        needed = count * width + reserve
        if needed > self.remaining:
            raise MalformedCount(field, count, self._pos, needed, self.remaining)

    def _unpack(self, fmt: struct.Struct, field: Optional[str]) -> int:
        self.require(fmt.size, field)
        (value,) = fmt.unpack_from(self._data, self._pos)
        self._pos += fmt.size
        return value

    def read_uint8(self, field: Optional[str] = None) -> int:
        return self._unpack(_UINT8, field)

    def read_int8(self, field: Optional[str] = None) -> int:
        return self._unpack(_INT8, field)

    def read_uint16(self, field: Optional[str] = None) -> int:
        return self._unpack(_UINT16, field)

    def read_int16(self, field: Optional[str] = None) -> int:
        return self._unpack(_INT16, field)

    def read_uint32(self, field: Optional[str] = None) -> int:
        return self._unpack(_UINT32, field)

    def read_int32(self, field: Optional[str] = None) -> int:
        return self._unpack(_INT32, field)

    def read_uint64(self, field: Optional[str] = None) -> int:
        return self._unpack(_UINT64, field)

    def read_float64(self, field: Optional[str] = None) -> float:
        """Read an IEEE-754 double. AVL timestamps and 8-byte I/O values are integers; use ``read_uint64`` for those."""
        return self._unpack(_FLOAT64, field)

    def read_bytes(self, size: int, field: Optional[str] = None) -> bytes:
        self.require(size, field)
        chunk = self._data[self._pos: self._pos + size]
        self._pos += size
        return chunk


def bytes_to_int(data: bytes) -> int:
    """Interpret a byte string as an unsigned big-endian integer (0 for empty input)."""
    return int.from_bytes(data, byteorder="big", signed=False)


def get_bit(value: int, bit_index: int, width: int = 8) -> bool:
    if bit_index < 0 or bit_index >= width:
        raise ValueError(f"bit_index must be between 0 and {width - 1}")
    return bool(value & (1 << bit_index))


__all__ = ["ByteCursor", "bytes_to_int", "get_bit"]
