# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signal levels and symbol values used by the CDP transcoder.
"""

from enum import IntEnum


class SignalLevel(IntEnum):
    """Logic level of the line (last emitted or assumed)."""
    LOW = 0
    HIGH = 1

    def __str__(self) -> str:
        return self.name


class Symbol(IntEnum):
    """Valid 2-bit CDP symbols."""
    NO_MID_TRANSITION = 0b01
    MID_TRANSITION = 0b10

    def __str__(self) -> str:
        return f"{self.value:02b}"


# Every encode or decode call starts from this level
INITIAL_SIGNAL_LEVEL = SignalLevel.HIGH

BITS_PER_BYTE = 8
ENCODED_UNIT_BYTES = 2
