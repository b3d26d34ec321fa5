#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Test and transcoding tool for the CDP (Differential Manchester) codec.

Usage:
    python cdp_tool.py selftest
    python cdp_tool.py selftest --size 65536 --seed 42 --show
    python cdp_tool.py encode 74
    python cdp_tool.py decode 5aa6 --bits
    python cdp_tool.py loopback --port /dev/ttyUSB0 --size 256

Requirements:
    pip install pyserial
"""

import argparse
import random
import sys

try:
    import serial
except ImportError:
    print("Error: pyserial not installed. Run: pip install pyserial")
    sys.exit(1)

from cdp_codec import (
    CDPDecodeError,
    Transport,
    cdp_decode,
    decode,
    encode,
    format_bytes,
)
from cdp_codec.transport import TransportError

KNOWN_BYTE = 0b01110100
SEPARATOR = "--------------------------------"


def known_byte_test() -> bool:
    """Encode and decode one known byte value."""
    data = bytes([KNOWN_BYTE])
    encoded = bytearray(2)

    print(f"\n{SEPARATOR}\n")
    print("TEST 0:\n")
    print(f"Input data:   {format_bytes(data)}")
    if not encode(data, len(data), encoded, len(encoded)):
        print("Error encoding data.")
        return False
    print(f"Encoded data: {format_bytes(encoded, ', ')}")

    decoded = bytearray(1)
    if not decode(encoded, len(encoded), decoded, len(decoded)):
        print("Error decoding data.")
        return False
    print(f"Decoded data: {format_bytes(decoded)}\n")

    return decoded == data


def random_data_test(size: int = 4096, seed=None, show: bool = False) -> bool:
    """Encode and decode random bytes, then compare with the input."""
    rng = random.Random(seed)
    data = bytes(rng.getrandbits(8) for _ in range(size))
    encoded = bytearray(size * 2)
    decoded = bytearray(size)

    print(f"\n{SEPARATOR}\n")
    print("TEST 1:\n")

    if show:
        print(f"Input data:\n{format_bytes(data, '')}\n")

    if not encode(data, size, encoded, len(encoded)):
        print("Error encoding data.")
        return False

    if show:
        print(f"Encoded data:\n{format_bytes(encoded, '')}\n")

    if not decode(encoded, len(encoded), decoded, size):
        print("Error decoding data.")
        return False

    if show:
        print(f"Decoded data:\n{format_bytes(decoded, '')}\n")

    print("Comparing decoded bytes with original input bytes...")
    any_fail = False
    for i, (expected, actual) in enumerate(zip(data, decoded)):
        if expected != actual:
            print(f"Byte {i} - FAIL!")
            print("    Input byte != Decoded byte")
            print(f"{expected:08b} != {actual:08b}")
            any_fail = True

    if any_fail:
        print("Error, decoded data != input data.\n")
        return False
    print("Ok, decoded data == input data.\n")
    return True


def cmd_selftest(size: int, seed, show: bool) -> bool:
    """Run the built-in encode/decode tests."""
    results = [known_byte_test(), random_data_test(size, seed, show)]
    for i, ok in enumerate(results):
        print(f"TEST {i} Result - {'OK' if ok else 'FAIL'}")
    print(f"\n{SEPARATOR}\n")
    return all(results)


def cmd_encode(hex_data: str, bits: bool):
    """Encode a hex string."""
    data = bytes.fromhex(hex_data)
    encoded = bytearray(len(data) * 2)
    encode(data, len(data), encoded, len(encoded))
    print(encoded.hex())
    if bits:
        print(format_bytes(encoded))


def cmd_decode(hex_data: str, bits: bool, strict: bool):
    """Decode a hex string."""
    data = bytes.fromhex(hex_data)
    decoded = cdp_decode(data, strict=strict)
    print(decoded.hex())
    if bits:
        print(format_bytes(decoded))


def cmd_loopback(transport: Transport, size: int, seed) -> bool:
    """Push random bytes through a looped-back serial line."""
    rng = random.Random(seed)
    data = bytes(rng.getrandbits(8) for _ in range(size))

    print(f"Port:     {transport.port}")
    print(f"Payload:  {size} bytes ({size * 2} bytes on the line)")
    print("Sending... ", end="", flush=True)
    transport.loopback(data)
    print("OK")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Test and transcoding tool for the CDP codec"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # selftest command
    selftest_parser = subparsers.add_parser("selftest", help="Run encode/decode self tests")
    selftest_parser.add_argument("--size", "-n", type=int, default=4096,
                                 help="Number of random bytes for test 1")
    selftest_parser.add_argument("--seed", "-s", type=int, default=None,
                                 help="Random seed (default: time based)")
    selftest_parser.add_argument("--show", action="store_true",
                                 help="Print input, encoded and decoded data")

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode a hex string")
    encode_parser.add_argument("data", help="Raw data as hex (e.g. 74)")
    encode_parser.add_argument("--bits", action="store_true",
                               help="Also print the result in binary")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a hex string")
    decode_parser.add_argument("data", help="Encoded data as hex (e.g. 5aa6)")
    decode_parser.add_argument("--bits", action="store_true",
                               help="Also print the result in binary")
    decode_parser.add_argument("--strict", action="store_true",
                               help="Reject invalid symbols and odd lengths")

    # loopback command
    loopback_parser = subparsers.add_parser("loopback", help="Test a looped-back serial line")
    loopback_parser.add_argument("--port", "-p", required=True,
                                 help="Serial port (e.g., /dev/ttyUSB0)")
    loopback_parser.add_argument("--baudrate", "-b", type=int, default=115200,
                                 help="Baud rate")
    loopback_parser.add_argument("--size", "-n", type=int, default=256,
                                 help="Number of random bytes to send")
    loopback_parser.add_argument("--seed", "-s", type=int, default=None,
                                 help="Random seed (default: time based)")

    args = parser.parse_args(argv)

    if getattr(args, "size", 0) < 0:
        print("Error: --size cannot be negative")
        return 1

    if args.command == "selftest":
        return 0 if cmd_selftest(args.size, args.seed, args.show) else 1

    if args.command in ("encode", "decode"):
        try:
            if args.command == "encode":
                cmd_encode(args.data, args.bits)
            else:
                cmd_decode(args.data, args.bits, args.strict)
        except CDPDecodeError as e:
            print(f"Error: {e}")
            return 1
        except ValueError as e:
            print(f"Error: invalid hex data: {e}")
            return 1
        return 0

    try:
        transport = Transport(args.port, args.baudrate)
    except serial.SerialException as e:
        print(f"Error opening {args.port}: {e}")
        return 1

    try:
        cmd_loopback(transport, args.size, args.seed)
    except TransportError as e:
        print(f"FAILED\nError: {e}")
        return 1
    finally:
        transport.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
