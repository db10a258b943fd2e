from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from avldecode.core.binary import bytes_to_int
from avldecode.parsing.records.model import Record


@dataclass(frozen=True)
class Packet:
    """
    A decoded AVL packet.

    Identification packets carry only ``identity``; every data field keeps its
    zero/empty default. Data packets leave ``identity`` as ``None``.

    Attributes:
        is_identification: True for the identification handshake.
        identity: Device identifier (IMEI) of an identification packet.
        preamble: The 2-byte zero marker that opens a data packet.
        data_length: Declared length of the AVL data section.
        codec_id: Codec ID byte selecting the record layout.
        declared_record_count: Record count from the header.
        records: Decoded records in wire order.
        echoed_record_count: Record count repeated in the footer.
        crc: The four trailing CRC bytes, unverified.
        warnings: Non-fatal anomalies noticed while decoding.
    """
    is_identification: bool
    identity: Optional[str] = None
    preamble: int = 0
    data_length: int = 0
    codec_id: int = 0
    declared_record_count: int = 0
    records: tuple[Record, ...] = field(default_factory=tuple)
    echoed_record_count: int = 0
    crc: tuple[int, int, int, int] = (0, 0, 0, 0)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def crc_value(self) -> int:
        return bytes_to_int(bytes(self.crc))

    @property
    def is_consistent(self) -> bool:
        """True when header count, footer count and decoded records agree."""
        return len(self.records) == self.declared_record_count == self.echoed_record_count

    def as_dict(self) -> dict[str, Any]:
        if self.is_identification:
            return {"is_identification": True, "identity": self.identity}
        return {
            "is_identification": False,
            "preamble": self.preamble,
            "data_length": self.data_length,
            "codec_id": self.codec_id,
            "declared_record_count": self.declared_record_count,
            "records": [r.as_dict() for r in self.records],
            "echoed_record_count": self.echoed_record_count,
            "crc": list(self.crc),
            "warnings": list(self.warnings),
        }
