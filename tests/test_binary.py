"""Tests for ByteCursor bounds checking and big-endian reads."""
import struct

import pytest

from avldecode.core.binary import ByteCursor, bytes_to_int, get_bit
from avldecode.core.errors import BufferUnderrun, DecodeError, MalformedCount


def test_reads_are_big_endian_and_advance():
    cursor = ByteCursor(bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07]))
    assert cursor.read_uint8() == 0x01
    assert cursor.read_uint16() == 0x0203
    assert cursor.read_uint32() == 0x04050607
    assert cursor.position == 7
    assert cursor.remaining == 0


def test_signed_reads():
    cursor = ByteCursor(bytes([0xFF, 0xFF, 0xFE, 0xFF, 0xFF, 0xFF, 0xFD]))
    assert cursor.read_int8() == -1
    assert cursor.read_int16() == -2
    assert cursor.read_int32() == -3


def test_read_uint64():
    cursor = ByteCursor((1_560_000_000_000).to_bytes(8, "big"))
    assert cursor.read_uint64() == 1_560_000_000_000


def test_read_float64():
    cursor = ByteCursor(struct.pack(">d", 12.5))
    assert cursor.read_float64() == 12.5


def test_read_bytes():
    cursor = ByteCursor(b"abcdef")
    assert cursor.read_bytes(2) == b"ab"
    assert cursor.read_bytes(0) == b""
    assert cursor.read_bytes(4) == b"cdef"


def test_underrun_is_raised_and_position_kept():
    cursor = ByteCursor(bytes([0x00, 0x01, 0x02]))
    cursor.read_uint8()
    with pytest.raises(BufferUnderrun) as excinfo:
        cursor.read_uint32("data length")
    err = excinfo.value
    assert err.offset == 1
    assert err.requested == 4
    assert err.available == 2
    assert err.field == "data length"
    assert "data length" in str(err)
    assert cursor.position == 1
    # Still usable after the failure.
    assert cursor.read_uint16() == 0x0102


def test_underrun_is_decode_error_and_value_error():
    cursor = ByteCursor(b"")
    with pytest.raises(DecodeError):
        cursor.read_uint8()
    with pytest.raises(ValueError):
        cursor.read_bytes(1)


def test_require_count_raises_malformed_count():
    cursor = ByteCursor(bytes(10))
    cursor.require_count(3, 3, field="items")
    with pytest.raises(MalformedCount) as excinfo:
        cursor.require_count(4, 3, field="items")
    assert excinfo.value.count == 4
    assert excinfo.value.requested == 12
    assert excinfo.value.available == 10
    assert isinstance(excinfo.value, BufferUnderrun)


def test_require_count_reserve():
    cursor = ByteCursor(bytes(10))
    with pytest.raises(MalformedCount):
        cursor.require_count(1, 6, field="records", reserve=5)


def test_len_is_total_size():
    cursor = ByteCursor(bytearray(5))
    cursor.read_uint8()
    assert len(cursor) == 5


def test_bytes_to_int():
    assert bytes_to_int(bytes([0x00, 0x00, 0xAB, 0xCD])) == 0xABCD
    assert bytes_to_int(b"") == 0


def test_get_bit():
    assert get_bit(0x80, 7) is True
    assert get_bit(0x80, 6) is False
    assert get_bit(0x80000000, 31, width=32) is True
    with pytest.raises(ValueError):
        get_bit(0x01, 8)
