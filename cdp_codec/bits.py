# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Bit extraction and binary-string helpers.
"""

from typing import Iterable, List


def get_bit(value: int, bit_n: int) -> int:
    """
    Return a single bit of an integer.

    Args:
        value: Integer to read from
        bit_n: Bit number, 0 being the least significant

    Returns:
        Bit value (0 or 1)
    """
    return (value >> bit_n) & 0x01


def _check_byte(byte: int):
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Byte value out of range: {byte}")


def byte_to_bits(byte: int) -> List[int]:
    """Split a byte into 8 bits, least significant first."""
    _check_byte(byte)
    return [get_bit(byte, i) for i in range(8)]


def bits_to_byte(bits: Iterable[int]) -> int:
    """
    Pack bits (least significant first) into a byte.

    Raises:
        ValueError: If more than 8 bits are given or a bit is not 0/1
    """
    byte = 0
    for i, bit in enumerate(bits):
        if i >= 8:
            raise ValueError("Too many bits for a byte")
        if bit not in (0, 1):
            raise ValueError(f"Invalid bit value: {bit}")
        byte |= bit << i
    return byte


def format_byte(byte: int) -> str:
    """Binary representation of a byte, MSB first (e.g. '01110100')."""
    _check_byte(byte)
    return f"{byte:08b}"


def format_bytes(data: bytes, sep: str = " ") -> str:
    """Binary representation of each byte in data, joined by sep."""
    return sep.join(format_byte(b) for b in data)
