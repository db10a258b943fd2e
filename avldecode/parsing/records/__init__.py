"""
Record layouts, one per codec ID.

- ``codec8``: signed-magnitude coordinates, catalog-labelled properties.
- ``codec16``: legacy layout with raw coordinates and unlabelled properties.
- ``codec7``: registered but unsupported.
"""
from avldecode.parsing.records.base import RecordCodec, get_codec, register_codec, registered_codecs
from avldecode.parsing.records.codec7 import CODEC7
from avldecode.parsing.records.codec8 import CODEC8, GPS_PRECISION, decode_coordinate
from avldecode.parsing.records.codec16 import CODEC16
from avldecode.parsing.records.model import (
    TRIP_EVENT_END,
    TRIP_EVENT_ID,
    TRIP_EVENT_START,
    GeoPosition,
    Record,
)

for _codec in (CODEC7, CODEC8, CODEC16):
    register_codec(_codec, replace=True)

__all__ = [
    "CODEC7",
    "CODEC8",
    "CODEC16",
    "GPS_PRECISION",
    "GeoPosition",
    "Record",
    "RecordCodec",
    "TRIP_EVENT_END",
    "TRIP_EVENT_ID",
    "TRIP_EVENT_START",
    "decode_coordinate",
    "get_codec",
    "register_codec",
    "registered_codecs",
]
