"""
Codec 8 record layout.

``[8B timestamp][1B priority][4B lon][4B lat][2B alt][2B angle][1B sats]
[2B speed][1B event id][1B property count][property block]``

Coordinates carry their sign in the top bit of the 32-bit field: a clear
top bit means a negative coordinate. The low 31 bits hold the magnitude in
units of 1e-7 degrees.
"""
from __future__ import annotations

from typing import Optional

from avldecode.catalog import PropertyCatalog
from avldecode.core.binary import ByteCursor, get_bit
from avldecode.parsing.properties import decode_property_block
from avldecode.parsing.records.base import RecordCodec
from avldecode.parsing.records.model import GeoPosition, Record

CODEC_ID = 8
GPS_PRECISION = 10_000_000

_SIGN_BIT = 31
_MAGNITUDE_MASK = 0x7FFFFFFF

# timestamp..property count plus four empty run counts.
MIN_RECORD_SIZE = 8 + 1 + 4 + 4 + 2 + 2 + 1 + 2 + 1 + 1 + 4


def decode_coordinate(raw: int) -> float:
    """Convert a raw 32-bit coordinate field to signed degrees."""
    magnitude = raw & _MAGNITUDE_MASK
    if not get_bit(raw, _SIGN_BIT, width=32):
        magnitude = -magnitude
    return magnitude / GPS_PRECISION


def decode_record(cursor: ByteCursor, catalog: Optional[PropertyCatalog] = None) -> Record:
    timestamp = cursor.read_uint64("timestamp")
    priority = cursor.read_uint8("priority")
    position = GeoPosition(
        longitude=decode_coordinate(cursor.read_uint32("longitude")),
        latitude=decode_coordinate(cursor.read_uint32("latitude")),
        altitude=cursor.read_int16("altitude"),
        angle=cursor.read_uint16("angle"),
        satellites=cursor.read_uint8("satellites"),
        speed=cursor.read_uint16("speed"),
    )
    event_id = cursor.read_uint8("event id")
    property_count = cursor.read_uint8("property count")
    properties = decode_property_block(cursor, catalog)
    return Record(
        timestamp=timestamp,
        priority=priority,
        position=position,
        event_id=event_id,
        property_count=property_count,
        properties=properties,
    )


CODEC8 = RecordCodec(
    codec_id=CODEC_ID,
    name="codec8",
    min_record_size=MIN_RECORD_SIZE,
    decoder=decode_record,
)
