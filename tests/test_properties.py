"""Tests for the typed I/O property block decoder."""
import pytest

from avldecode.catalog import PropertyCatalog
from avldecode.core.binary import ByteCursor
from avldecode.core.errors import BufferUnderrun, MalformedCount
from avldecode.parsing.properties import Property, decode_property_block


def _build_block(ones=(), twos=(), fours=(), eights=()) -> bytes:
    """Helper: build the four property runs from (id, value) pairs."""
    buf = bytearray()
    for width, entries in ((1, ones), (2, twos), (4, fours), (8, eights)):
        buf.append(len(entries))
        for prop_id, value in entries:
            buf.append(prop_id)
            buf.extend(value.to_bytes(width, "big", signed=width in (2, 4)))
    return bytes(buf)


def test_empty_block_reads_four_counts():
    cursor = ByteCursor(_build_block() + b"\xff")
    assert decode_property_block(cursor) == ()
    assert cursor.position == 4


def test_values_per_width():
    block = _build_block(
        ones=[(239, 1)],
        twos=[(66, 12_345)],
        fours=[(199, 100_000)],
        eights=[(11, 0x0102030405060708)],
    )
    props = decode_property_block(ByteCursor(block))
    assert [(p.id, p.value, p.size) for p in props] == [
        (239, 1, 1),
        (66, 12_345, 2),
        (199, 100_000, 4),
        (11, 0x0102030405060708, 8),
    ]


def test_two_and_four_byte_values_are_signed():
    block = _build_block(twos=[(17, -150)], fours=[(18, -70_000)])
    props = decode_property_block(ByteCursor(block))
    assert props[0].value == -150
    assert props[1].value == -70_000


def test_one_and_eight_byte_values_are_unsigned():
    block = _build_block(ones=[(1, 0xFF)], eights=[(11, 0xFFFFFFFFFFFFFFFF)])
    props = decode_property_block(ByteCursor(block))
    assert props[0].value == 255
    assert props[1].value == 0xFFFFFFFFFFFFFFFF


def test_encounter_order_is_kept():
    # IDs out of numeric order within and across runs.
    block = _build_block(
        ones=[(240, 0), (1, 1)],
        twos=[(67, 4000), (9, 5)],
        fours=[(16, 1)],
    )
    ids = [p.id for p in decode_property_block(ByteCursor(block))]
    assert ids == [240, 1, 67, 9, 16]


def test_catalog_enrichment():
    block = _build_block(ones=[(1, 1), (239, 0)], twos=[(66, 12_000)])
    props = decode_property_block(ByteCursor(block), PropertyCatalog())
    assert props[0] == Property(id=1, value=1, size=1, label="Din 1", unit="", human_value="1")
    assert props[1].label == "Ignition"
    assert props[1].human_value == "No"
    assert props[2].label == "Ext Voltage"
    assert props[2].unit == "mV"
    assert props[2].human_value == ""


def test_unknown_id_yields_empty_strings():
    block = _build_block(ones=[(3, 1)])
    (prop,) = decode_property_block(ByteCursor(block), PropertyCatalog())
    assert prop.label == ""
    assert prop.unit == ""
    assert prop.human_value == ""


def test_no_catalog_yields_empty_strings():
    block = _build_block(ones=[(1, 1)])
    (prop,) = decode_property_block(ByteCursor(block))
    assert (prop.label, prop.unit, prop.human_value) == ("", "", "")


def test_count_beyond_buffer_raises_malformed_count():
    # 1-byte run claims 5 entries but only one pair follows.
    data = bytes([5, 1, 1])
    with pytest.raises(MalformedCount) as excinfo:
        decode_property_block(ByteCursor(data))
    assert excinfo.value.count == 5


def test_missing_run_count_raises_underrun():
    # First run complete, second run count missing.
    data = bytes([1, 1, 1])
    with pytest.raises(BufferUnderrun):
        decode_property_block(ByteCursor(data))


def test_property_as_dict():
    prop = Property(id=1, value=1, size=1, label="Din 1", unit="", human_value="1")
    assert prop.as_dict() == {
        "id": 1,
        "value": 1,
        "size": 1,
        "label": "Din 1",
        "unit": "",
        "human_value": "1",
    }
