"""
Record codec registry.

A packet selects one record layout through its codec ID byte. Each layout is
a ``RecordCodec`` entry in a dispatch table; a new firmware layout is added by
registering another entry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from avldecode.catalog import PropertyCatalog
from avldecode.core.binary import ByteCursor
from avldecode.core.errors import UnknownCodec, UnsupportedCodec
from avldecode.parsing.records.model import Record

RecordDecoder = Callable[[ByteCursor, Optional[PropertyCatalog]], Record]


@dataclass(frozen=True)
class RecordCodec:
    """
    One record layout.

    Attributes:
        codec_id: The codec ID byte that selects this layout.
        name: Short name for logs.
        min_record_size: Smallest possible encoded record, in bytes.
        decoder: Function decoding one record at the cursor, or ``None``
            for layouts that are recognised but not implemented.
    """
    codec_id: int
    name: str
    min_record_size: int
    decoder: Optional[RecordDecoder] = None

    @property
    def supported(self) -> bool:
        return self.decoder is not None

    def decode_record(self, cursor: ByteCursor, catalog: Optional[PropertyCatalog] = None) -> Record:
        if self.decoder is None:
            raise UnsupportedCodec(self.codec_id)
        return self.decoder(cursor, catalog)


_CODECS: dict[int, RecordCodec] = {}


def register_codec(codec: RecordCodec, replace: bool = False) -> RecordCodec:
    if codec.codec_id in _CODECS and not replace:
        raise ValueError(f"Codec {codec.codec_id} is already registered")
    _CODECS[codec.codec_id] = codec
    return codec


def get_codec(codec_id: int) -> RecordCodec:
    """
    Resolve the record layout for ``codec_id``.

    Raises:
        UnknownCodec: If no layout is registered for the ID.
        UnsupportedCodec: If the layout is registered but not implemented.
    """
    codec = _CODECS.get(codec_id)
    if codec is None:
        raise UnknownCodec(codec_id)
    if not codec.supported:
        raise UnsupportedCodec(codec_id)
    return codec


def registered_codecs() -> dict[int, RecordCodec]:
    return dict(_CODECS)
