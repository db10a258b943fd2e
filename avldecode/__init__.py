from avldecode.catalog import PropertyCatalog, PropertyDescriptor, default_catalog
from avldecode.config import DecoderSettings, get_settings
from avldecode.core.errors import (
    BufferUnderrun,
    DecodeError,
    MalformedCount,
    RecordCountMismatch,
    UnknownCodec,
    UnsupportedCodec,
)
from avldecode.parsing.packet import Packet, PacketDecoder, decode_packet, decode_packet_b64, decode_packet_hex
from avldecode.parsing.properties import Property
from avldecode.parsing.records import GeoPosition, Record, RecordCodec, get_codec, register_codec
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "BufferUnderrun",
    "DecodeError",
    "DecoderSettings",
    "GeoPosition",
    "MalformedCount",
    "Packet",
    "PacketDecoder",
    "Property",
    "PropertyCatalog",
    "PropertyDescriptor",
    "Record",
    "RecordCodec",
    "RecordCountMismatch",
    "UnknownCodec",
    "UnsupportedCodec",
    "decode_packet",
    "decode_packet_b64",
    "decode_packet_hex",
    "default_catalog",
    "get_codec",
    "get_settings",
    "register_codec",
]

try:
    __version__ = version("avldecode")
except PackageNotFoundError:
    __version__ = "0.0.0"
