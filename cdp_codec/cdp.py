# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Conditional DePhase (CDP) encoder/decoder.

CDP, also known as Differential Manchester Code (IEEE 802.5), turns every
data bit into a 2-bit symbol whose value depends on the current signal
level, so a receiver only needs relative transitions to recover the data.

Byte layout follows Ethernet conventions:
    Byte order: big endian (high byte of each encoded unit sent first)
    Bit order: little endian (bit 0 of each raw byte encoded first)

Example:
    Raw byte:     01110100
    Encoded unit: 01011010 10100110
"""

from typing import Tuple

from .bits import get_bit
from .levels import (
    BITS_PER_BYTE,
    ENCODED_UNIT_BYTES,
    INITIAL_SIGNAL_LEVEL,
    SignalLevel,
    Symbol,
)


class CDPDecodeError(ValueError):
    """Encoded data is not a valid CDP stream (strict decoding only)."""
    pass


# Encoded-unit bit position of the symbol for raw bit i. Starts at 8 and
# wraps from 16 back to 0, so raw bits 0-3 land in the high byte.
_SYMBOL_POSITIONS = tuple(
    (8 + 2 * i) % 16 for i in range(BITS_PER_BYTE)
)


def encode_bit(data_bit: int, level: int) -> Tuple[Symbol, SignalLevel]:
    """
    Encode one data bit.

    Truth table (c = level, d = data_bit):
        cd | 00 | 01 | 10 | 11
         o | 10 | 01 | 01 | 10

    Args:
        data_bit: Bit to encode (0 or 1)
        level: Current signal level

    Returns:
        Tuple of (2-bit symbol, new signal level)
    """
    if data_bit == level:
        return Symbol.MID_TRANSITION, SignalLevel.LOW
    return Symbol.NO_MID_TRANSITION, SignalLevel.HIGH


def decode_bit(
    symbol: int, level: int, strict: bool = False
) -> Tuple[int, SignalLevel]:
    """
    Decode one 2-bit symbol, the exact inverse of encode_bit.

    Any symbol other than 0b10 is decoded as 0b01 unless strict is set.

    Args:
        symbol: 2-bit encoded symbol
        level: Current signal level
        strict: Reject 0b00 and 0b11 symbols

    Returns:
        Tuple of (decoded bit, new signal level)

    Raises:
        CDPDecodeError: If strict and the symbol is not valid
    """
    if symbol == Symbol.MID_TRANSITION:
        return int(level), SignalLevel.LOW
    if strict and symbol != Symbol.NO_MID_TRANSITION:
        raise CDPDecodeError(f"CDP decode: invalid symbol {symbol:02b}")
    return int(not level), SignalLevel.HIGH


def encode_byte(byte: int, level: int) -> Tuple[int, SignalLevel]:
    """
    Encode one raw byte into a 16-bit encoded unit.

    Args:
        byte: Raw byte value (0-255)
        level: Signal level before the first bit

    Returns:
        Tuple of (16-bit encoded unit, signal level after the last bit)
    """
    unit = 0
    for i, pos in enumerate(_SYMBOL_POSITIONS):
        symbol, level = encode_bit(get_bit(byte, i), level)
        unit |= get_bit(symbol, 1) << pos
        unit |= get_bit(symbol, 0) << (pos + 1)
    return unit, SignalLevel(level)


def decode_byte(
    unit: int, level: int, strict: bool = False
) -> Tuple[int, SignalLevel]:
    """
    Decode a 16-bit encoded unit back into a raw byte.

    Args:
        unit: 16-bit encoded unit (high byte = bits 8..15)
        level: Signal level before the first symbol
        strict: Reject invalid symbols

    Returns:
        Tuple of (decoded byte, signal level after the last symbol)
    """
    byte = 0
    for i, pos in enumerate(_SYMBOL_POSITIONS):
        symbol = (get_bit(unit, pos) << 1) | get_bit(unit, pos + 1)
        bit, level = decode_bit(symbol, level, strict)
        byte |= bit << i
    return byte, SignalLevel(level)


def _check_lengths(data_in, data_in_len: int, data_out, data_out_len: int):
    """Validate declared lengths against the buffers actually supplied."""
    if data_in_len < 0 or data_out_len < 0:
        raise ValueError("Buffer length cannot be negative")
    if data_in_len > len(data_in):
        raise ValueError(
            f"Input length {data_in_len} exceeds input buffer ({len(data_in)} bytes)"
        )
    if data_out_len > len(data_out):
        raise ValueError(
            f"Output length {data_out_len} exceeds output buffer ({len(data_out)} bytes)"
        )


def encode(data_in: bytes, data_in_len: int,
           data_out: bytearray, data_out_len: int) -> bool:
    """
    Encode a buffer with CDP.

    Each input byte produces one big-endian 16-bit unit in data_out. The
    signal level starts HIGH and carries over from byte to byte.

    Args:
        data_in: Raw bytes to encode
        data_in_len: Number of bytes to encode from data_in
        data_out: Mutable buffer receiving the encoded data
        data_out_len: Number of bytes that can be stored in data_out

    Returns:
        False (nothing written) if data_out_len < 2 * data_in_len,
        True otherwise

    Raises:
        ValueError: If a declared length exceeds its buffer
    """
    _check_lengths(data_in, data_in_len, data_out, data_out_len)
    if data_in_len * ENCODED_UNIT_BYTES > data_out_len:
        return False

    level = INITIAL_SIGNAL_LEVEL
    out_i = 0
    for i in range(data_in_len):
        unit, level = encode_byte(data_in[i], level)
        data_out[out_i] = (unit >> 8) & 0xFF
        data_out[out_i + 1] = unit & 0xFF
        out_i += ENCODED_UNIT_BYTES

    return True


def decode(data_in: bytes, data_in_len: int,
           data_out: bytearray, data_out_len: int,
           strict: bool = False) -> bool:
    """
    Decode a CDP-encoded buffer.

    Input is consumed two bytes at a time; a trailing odd byte is ignored
    unless strict is set. The signal level starts HIGH for the whole call.

    Args:
        data_in: Encoded bytes
        data_in_len: Number of bytes to decode from data_in
        data_out: Mutable buffer receiving the decoded data
        data_out_len: Number of bytes that can be stored in data_out
        strict: Reject invalid symbols and odd-length input

    Returns:
        False (nothing written) if 2 * data_out_len < data_in_len,
        True otherwise

    Raises:
        ValueError: If a declared length exceeds its buffer
        CDPDecodeError: If strict and the input is malformed
    """
    _check_lengths(data_in, data_in_len, data_out, data_out_len)
    if data_out_len * ENCODED_UNIT_BYTES < data_in_len:
        return False
    if strict and data_in_len % ENCODED_UNIT_BYTES:
        raise CDPDecodeError(
            f"CDP decode: odd encoded length ({data_in_len} bytes)"
        )

    level = INITIAL_SIGNAL_LEVEL
    decoded = bytearray()
    for i in range(0, data_in_len - 1, ENCODED_UNIT_BYTES):
        unit = (data_in[i] << 8) | data_in[i + 1]
        byte, level = decode_byte(unit, level, strict)
        decoded.append(byte)

    # Written only once every unit decoded, so strict failures leave
    # data_out untouched
    data_out[:len(decoded)] = decoded
    return True


def cdp_encode(data: bytes) -> bytes:
    """
    Encode data with CDP.

    Args:
        data: Raw bytes to encode

    Returns:
        Encoded bytes (twice the input length)
    """
    output = bytearray(len(data) * ENCODED_UNIT_BYTES)
    encode(data, len(data), output, len(output))
    return bytes(output)


def cdp_decode(data: bytes, strict: bool = False) -> bytes:
    """
    Decode CDP-encoded data.

    Args:
        data: Encoded bytes
        strict: Reject invalid symbols and odd-length input

    Returns:
        Decoded raw bytes (half the input length, rounded down)

    Raises:
        CDPDecodeError: If strict and data is malformed
    """
    output = bytearray((len(data) + 1) // ENCODED_UNIT_BYTES)
    decode(data, len(data), output, len(output), strict)
    return bytes(output[:len(data) // ENCODED_UNIT_BYTES])
