"""
Codec 16 record layout, kept for older firmware.

Same field order as codec 8, but longitude and latitude are plain signed
32-bit integers left unscaled, and I/O properties are not labelled from the
catalog.
"""
from __future__ import annotations

from typing import Optional

from avldecode.catalog import PropertyCatalog
from avldecode.core.binary import ByteCursor
from avldecode.parsing.properties import decode_property_block
from avldecode.parsing.records.base import RecordCodec
from avldecode.parsing.records.codec8 import MIN_RECORD_SIZE
from avldecode.parsing.records.model import GeoPosition, Record

CODEC_ID = 16


def decode_record(cursor: ByteCursor, catalog: Optional[PropertyCatalog] = None) -> Record:
    # Codec 16 properties are never labelled.
    timestamp = cursor.read_uint64("timestamp")
    priority = cursor.read_uint8("priority")
    position = GeoPosition(
        longitude=float(cursor.read_int32("longitude")),
        latitude=float(cursor.read_int32("latitude")),
        altitude=cursor.read_int16("altitude"),
        angle=cursor.read_uint16("angle"),
        satellites=cursor.read_uint8("satellites"),
        speed=cursor.read_uint16("speed"),
    )
    event_id = cursor.read_uint8("event id")
    property_count = cursor.read_uint8("property count")
    properties = decode_property_block(cursor, None)
    return Record(
        timestamp=timestamp,
        priority=priority,
        position=position,
        event_id=event_id,
        property_count=property_count,
        properties=properties,
    )


CODEC16 = RecordCodec(
    codec_id=CODEC_ID,
    name="codec16",
    min_record_size=MIN_RECORD_SIZE,
    decoder=decode_record,
)
