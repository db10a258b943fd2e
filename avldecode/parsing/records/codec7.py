"""Codec 7: known to the dispatcher, no record layout implemented."""
from avldecode.parsing.records.base import RecordCodec

CODEC_ID = 7

CODEC7 = RecordCodec(codec_id=CODEC_ID, name="codec7", min_record_size=0)
