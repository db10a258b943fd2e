"""
This package contains all modules related to decoding AVL packets.

Sub-packages handle each layer of the wire format:

- ``packet``: Identification/data packet framing and the top-level decoder.
- ``records``: Per-codec record layouts and the codec dispatch table.
- ``properties``: The typed I/O property block inside each record.
"""
