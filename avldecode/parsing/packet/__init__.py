from avldecode.parsing.packet.decode import (
    FOOTER_SIZE,
    PacketDecoder,
    decode_packet,
    decode_packet_b64,
    decode_packet_hex,
)
from avldecode.parsing.packet.model import Packet

__all__ = ["FOOTER_SIZE", "Packet", "PacketDecoder", "decode_packet", "decode_packet_b64", "decode_packet_hex"]
