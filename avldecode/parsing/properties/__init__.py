"""
Typed I/O property block decoding.

Each AVL record carries its sensor and status readings as four size-bucketed
runs of ``[id][value]`` pairs, labelled from the property catalog.
"""
from avldecode.parsing.properties.decode import PROPERTY_RUNS, decode_property_block
from avldecode.parsing.properties.model import Property

__all__ = ["PROPERTY_RUNS", "Property", "decode_property_block"]
