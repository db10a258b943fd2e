"""
Decoder for the typed I/O property block carried by every AVL record.

The block is four consecutive runs, one per value width, always in the
order 1, 2, 4, 8 bytes::

    [count] ([id][value]) * count     # repeated for each width

A run with a zero count is still present (its count byte is read).
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from avldecode.catalog import PropertyCatalog
from avldecode.core.binary import ByteCursor
from avldecode.parsing.properties.model import Property


class _Run(NamedTuple):
    width: int
    read: Callable[[ByteCursor], int]


# Value readers per run width. 2- and 4-byte values are signed,
# 1- and 8-byte values unsigned.
PROPERTY_RUNS: tuple[_Run, ...] = (
    _Run(1, lambda c: c.read_uint8("property value")),
    _Run(2, lambda c: c.read_int16("property value")),
    _Run(4, lambda c: c.read_int32("property value")),
    _Run(8, lambda c: c.read_uint64("property value")),
)


def decode_property_block(cursor: ByteCursor, catalog: Optional[PropertyCatalog] = None) -> tuple[Property, ...]:
    """
    Decode the four property runs at the cursor position.

    Args:
        cursor: Cursor positioned at the 1-byte run count.
        catalog: When given, each property is labelled from it. Without a
            catalog the label, unit and human value stay empty.

    Returns:
        Properties in encounter order across all runs.

    Raises:
        MalformedCount: If a run count implies more bytes than remain.
        BufferUnderrun: If the buffer ends before a run count.
    """
    properties: list[Property] = []
    for run in PROPERTY_RUNS:
        count = cursor.read_uint8(f"{run.width}-byte property count")
        cursor.require_count(count, 1 + run.width, field=f"{run.width}-byte property count")
        for _ in range(count):
            prop_id = cursor.read_uint8("property id")
            value = run.read(cursor)
            properties.append(_make_property(prop_id, value, run.width, catalog))
    return tuple(properties)


def _make_property(prop_id: int, value: int, width: int, catalog: Optional[PropertyCatalog]) -> Property:
    if catalog is None:
        return Property(id=prop_id, value=value, size=width)
    label, unit, human_value = catalog.describe(prop_id, value)
    return Property(
        id=prop_id,
        value=value,
        size=width,
        label=label,
        unit=unit,
        human_value=human_value,
    )
