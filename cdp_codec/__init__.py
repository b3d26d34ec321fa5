# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Conditional DePhase (Differential Manchester, IEEE 802.5) codec.

Example usage:
    from cdp_codec import cdp_encode, cdp_decode, encode

    encoded = cdp_encode(b"\\x74")       # b"\\x5a\\xa6"
    assert cdp_decode(encoded) == b"\\x74"

    # Buffer interface, reports insufficient capacity with False
    out = bytearray(4)
    ok = encode(b"ab", 2, out, len(out))

    # Over a serial line
    with Transport("/dev/ttyUSB0") as transport:
        transport.send(b"hello")
"""

from .bits import (
    get_bit,
    byte_to_bits,
    bits_to_byte,
    format_byte,
    format_bytes,
)
from .cdp import (
    CDPDecodeError,
    encode,
    decode,
    encode_bit,
    decode_bit,
    encode_byte,
    decode_byte,
    cdp_encode,
    cdp_decode,
)
from .levels import (
    SignalLevel,
    Symbol,
    INITIAL_SIGNAL_LEVEL,
)
from .transport import (
    Transport,
    TransportError,
    TimeoutError,
    LoopbackError,
)

__version__ = "0.1.0"

__all__ = [
    # Bits
    "get_bit",
    "byte_to_bits",
    "bits_to_byte",
    "format_byte",
    "format_bytes",
    # CDP
    "CDPDecodeError",
    "encode",
    "decode",
    "encode_bit",
    "decode_bit",
    "encode_byte",
    "decode_byte",
    "cdp_encode",
    "cdp_decode",
    # Levels
    "SignalLevel",
    "Symbol",
    "INITIAL_SIGNAL_LEVEL",
    # Transport
    "Transport",
    "TransportError",
    "TimeoutError",
    "LoopbackError",
]
