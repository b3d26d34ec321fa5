# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial transport carrying CDP-encoded data.

Every send() and receive() is an independent encode/decode call, so the
signal level restarts HIGH on each side for each transfer.
"""

import time

import serial

from .cdp import cdp_decode, cdp_encode
from .levels import ENCODED_UNIT_BYTES


class TransportError(Exception):
    """Base exception for transport errors."""
    pass


class TimeoutError(TransportError):
    """Timeout waiting for encoded data."""
    pass


class LoopbackError(TransportError):
    """Data read back over a loopback link differs from what was sent."""
    pass


class Transport:
    """
    Serial transport for CDP line data.

    Can be used as a context manager:
        with Transport("/dev/ttyUSB0") as t:
            t.send(b"hello")
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path (e.g., "/dev/ttyUSB0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 5.0)
        """
        self._ser = serial.Serial(port, baudrate, timeout=timeout)
        time.sleep(0.1)  # Let the line settle

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def _read_exact(self, size: int) -> bytes:
        """Read exactly size bytes or raise TimeoutError."""
        result = bytearray()
        while len(result) < size:
            chunk = self._ser.read(size - len(result))
            if not chunk:
                raise TimeoutError(
                    f"Timeout waiting for data ({len(result)}/{size} bytes received)"
                )
            result.extend(chunk)
        return bytes(result)

    def send(self, data: bytes) -> int:
        """
        Encode and send data.

        Args:
            data: Raw bytes to send

        Returns:
            Number of encoded bytes written to the line
        """
        encoded = cdp_encode(data)
        self._ser.write(encoded)
        self._ser.flush()
        return len(encoded)

    def receive(self, size: int) -> bytes:
        """
        Receive and decode size raw bytes.

        Args:
            size: Number of decoded bytes expected

        Returns:
            Decoded bytes

        Raises:
            TimeoutError: If the encoded data does not arrive in time
        """
        if size < 0:
            raise ValueError("Cannot receive a negative number of bytes")
        encoded = self._read_exact(size * ENCODED_UNIT_BYTES)
        return cdp_decode(encoded)

    def loopback(self, data: bytes) -> bytes:
        """
        Send data and read it back over a looped-back line.

        Args:
            data: Raw bytes to send

        Returns:
            Decoded bytes read back

        Raises:
            TimeoutError: If the echo does not arrive in time
            LoopbackError: If the echo differs from data
        """
        self.send(data)
        echoed = self.receive(len(data))
        if echoed != data:
            mismatches = sum(1 for a, b in zip(data, echoed) if a != b)
            raise LoopbackError(
                f"Loopback mismatch: {mismatches}/{len(data)} bytes differ"
            )
        return echoed
