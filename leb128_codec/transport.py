# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial transport for varint streams.

Varints are self-delimiting, so no extra framing is needed: a reader
pulls bytes until one has the continuation bit clear.
"""

import time
from typing import List, Optional

import serial

from .signed import SignedVarint
from .unsigned import UPPER_1, UnsignedVarint
from .varint import Varint

# Longest varint for a safe integer (53 bits unsigned, 56 bits biased signed)
MAX_VARINT_LENGTH = 8


class TransportError(Exception):
    """Base exception for transport errors."""
    pass


class TimeoutError(TransportError):
    """Timeout waiting for data."""
    pass


class ProtocolError(TransportError):
    """Received bytes are not a valid varint."""
    pass


class Transport:
    """
    Serial transport carrying LEB128 varints.

    Can be used as a context manager:
        with Transport("/dev/ttyACM0") as t:
            t.write_varint(300)
            value = t.read_varint()

    Any pyserial URL works as the port, e.g. "loop://" for a loopback.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
        max_length: int = MAX_VARINT_LENGTH,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path or pyserial URL
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 5.0)
            max_length: Longest varint accepted by read_varint
        """
        self._ser = serial.serial_for_url(port, baudrate, timeout=timeout)
        self._max_length = max_length
        time.sleep(0.1)  # Let the device settle

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

    def _send(self, data: bytes):
        """Send raw bytes."""
        self._ser.write(data)
        self._ser.flush()

    def write_varint(self, value: int, signed: Optional[bool] = None) -> bytes:
        """
        Encode and send a varint.

        Args:
            value: Integer to send
            signed: Force the signed (True) or unsigned (False) encoder,
                or pick from the sign of value (None)

        Returns:
            The bytes written
        """
        if signed is None:
            data = Varint.encode(value)
        elif signed:
            data = SignedVarint.encode(value)
        else:
            data = UnsignedVarint.encode(value)
        self._send(data)
        return data

    def write_varints(self, values: List[int]) -> bytes:
        """Encode and send several varints in one write."""
        data = b"".join(Varint.encode(v) for v in values)
        self._send(data)
        return data

    def read_raw(self) -> bytes:
        """
        Receive the bytes of one varint, terminator included.

        Raises:
            TimeoutError: If the port times out mid-varint
            ProtocolError: If no terminator arrives within max_length bytes
        """
        result = bytearray()
        while True:
            byte = self._ser.read(1)
            if not byte:
                raise TimeoutError("Timeout waiting for varint")
            result.append(byte[0])
            if not (byte[0] & UPPER_1):
                break
            if len(result) >= self._max_length:
                raise ProtocolError(
                    f"Varint longer than {self._max_length} bytes: {bytes(result).hex()}"
                )
        return bytes(result)

    def read_varint(self, signed: bool = False) -> int:
        """Receive and decode one varint."""
        return Varint.decode(self.read_raw(), 0, signed)
