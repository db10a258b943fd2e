"""
Top-level AVL packet decoder.

A buffer holds exactly one packet, either an identification handshake::

    [2B length][length bytes ASCII identifier]

or a data packet::

    [2B zero][2B zero][4B data length][1B codec id][1B record count]
    [record] * count
    [1B record count][4B CRC]

The first two bytes decide which: a non-zero length announces an identifier.
"""
from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional

from avldecode.catalog import PropertyCatalog, default_catalog
from avldecode.config import DecoderSettings, get_settings
from avldecode.core.binary import ByteCursor
from avldecode.core.errors import DecodeError, RecordCountMismatch
from avldecode.logging import create_logger, redact
from avldecode.parsing.packet.model import Packet
from avldecode.parsing.records import get_codec
from avldecode.parsing.records.model import Record

LOGGER_NAME = "avldecode"

# Echoed record count plus the four CRC bytes.
FOOTER_SIZE = 1 + 4


class PacketDecoder:
    """
    Decodes single AVL packets.

    The decoder keeps no state between calls, so one instance can be shared
    across threads.

    Args:
        settings: Decoder settings; defaults to ``get_settings()``.
        catalog: Property catalog used to label codec 8 properties;
            defaults to the packaged catalog.
        logger: Logger receiving decode events; defaults to a ring-buffered
            ``avldecode`` logger.
    """

    def __init__(
        self,
        settings: Optional[DecoderSettings] = None,
        catalog: Optional[PropertyCatalog] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.catalog = catalog if catalog is not None else default_catalog()
        self.logger = logger or create_logger(LOGGER_NAME, self.settings.log_ring_size, self.settings.log_level)

    def decode(self, data: bytes | bytearray | memoryview) -> Packet:
        """
        Decode one complete packet.

        Args:
            data: The raw packet bytes.

        Returns:
            The decoded ``Packet``.

        Raises:
            BufferUnderrun: The buffer ends before a field.
            MalformedCount: A declared count cannot fit in the buffer.
            UnknownCodec: The codec ID is not registered.
            UnsupportedCodec: The codec ID is registered but not implemented.
            RecordCountMismatch: Footer and header counts differ in strict mode.
            DecodeError: The identifier is not ASCII.
        """
        cursor = ByteCursor(data)
        try:
            return self._decode(cursor)
        except DecodeError as exc:
            self._log(
                logging.WARNING,
                "decode_failed",
                {"error": str(exc), "kind": type(exc).__name__, "offset": cursor.position, "size": len(cursor)},
            )
            raise

    def _decode(self, cursor: ByteCursor) -> Packet:
        identity_length = cursor.read_uint16("identity length")
        if identity_length > 0:
            return self._decode_identity(cursor, identity_length)

        preamble = cursor.read_uint16("preamble")
        data_length = cursor.read_uint32("data length")
        codec_id = cursor.read_uint8("codec id")
        declared = cursor.read_uint8("record count")

        codec = get_codec(codec_id)
        cursor.require_count(declared, codec.min_record_size, field="record count", reserve=FOOTER_SIZE)

        records: list[Record] = []
        warnings: list[str] = []
        for index in range(declared):
            record = codec.decode_record(cursor, self.catalog)
            if len(record.properties) != record.property_count:
                warnings.append(
                    f"record {index} declares {record.property_count} properties, "
                    f"decoded {len(record.properties)}"
                )
            records.append(record)

        echoed = cursor.read_uint8("echoed record count")
        crc0, crc1, crc2, crc3 = cursor.read_bytes(4, "crc")
        crc = (crc0, crc1, crc2, crc3)

        if echoed != declared:
            if self.settings.strict_record_count:
                raise RecordCountMismatch(declared, echoed)
            warnings.append(f"footer echoes {echoed} records, header declares {declared}")
            self._log(logging.WARNING, "record_count_mismatch", {"declared": declared, "echoed": echoed})

        if cursor.remaining:
            warnings.append(f"{cursor.remaining} trailing byte(s) after footer")
            self._log(logging.WARNING, "trailing_bytes", {"count": cursor.remaining})

        packet = Packet(
            is_identification=False,
            preamble=preamble,
            data_length=data_length,
            codec_id=codec_id,
            declared_record_count=declared,
            records=tuple(records),
            echoed_record_count=echoed,
            crc=crc,
            warnings=tuple(warnings),
        )
        self._log(
            logging.INFO,
            "packet_decoded",
            {"codec": codec.name, "records": len(records), "warnings": len(warnings)},
        )
        return packet

    def _decode_identity(self, cursor: ByteCursor, length: int) -> Packet:
        cursor.require_count(length, 1, field="identity length")
        raw = cursor.read_bytes(length, "identity")
        try:
            identity = raw.decode("ascii")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Device identifier is not ASCII: {exc}") from exc

        warnings: tuple[str, ...] = ()
        if cursor.remaining:
            warnings = (f"{cursor.remaining} trailing byte(s) after identifier",)
            self._log(logging.WARNING, "trailing_bytes", {"count": cursor.remaining})

        self._log(logging.INFO, "identity_packet", {"identity": identity})
        return Packet(is_identification=True, identity=identity, warnings=warnings)

    def _log(self, level: int, event: str, details: dict) -> None:
        if self.settings.redact_identity:
            details = redact(details)
        self.logger.log(level, event, extra={"details": details})


def decode_packet(data: bytes | bytearray | memoryview, decoder: Optional[PacketDecoder] = None) -> Packet:
    """Decode one packet with ``decoder`` or a default ``PacketDecoder``."""
    return (decoder or PacketDecoder()).decode(data)


def decode_packet_hex(text: str, decoder: Optional[PacketDecoder] = None) -> Packet:
    """Decode a packet given as a hex string (whitespace is ignored)."""
    try:
        raw = bytes.fromhex("".join(text.split()))
    except ValueError as exc:
        raise DecodeError(f"Failed to decode packet hex: {exc}") from exc
    return decode_packet(raw, decoder)


def decode_packet_b64(text: str, decoder: Optional[PacketDecoder] = None) -> Packet:
    """Decode a packet given as a base64 string."""
    cleaned = "".join(text.split())
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Failed to decode packet base64: {exc}") from exc
    return decode_packet(raw, decoder)
