# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 encoding/decoding.

Each byte carries 7 bits of the value, least significant group first.
Bit 7 is set on every byte except the last one.
"""

from typing import Tuple

from .errors import BufferBoundsError, SignMismatchError, UnterminatedSequenceError
from .safe_integer import check_safe_integer

LOWER_7 = 0x7F
UPPER_1 = 0x80


def scan_terminator(buf, offset: int = 0) -> int:
    """
    Find the byte that ends the varint starting at offset.

    Args:
        buf: Bytes containing the varint
        offset: Starting offset in buf

    Returns:
        Absolute index of the first byte at or after offset whose
        continuation bit is clear

    Raises:
        BufferBoundsError: If offset is not a valid index into buf
        UnterminatedSequenceError: If buf ends before a terminator
    """
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise BufferBoundsError(f"Offset must be an int, got {type(offset).__name__}")
    if offset < 0 or offset >= len(buf):
        raise BufferBoundsError(
            f"Offset {offset} out of range for buffer of {len(buf)} bytes"
        )

    index = offset
    while buf[index] & UPPER_1:
        index += 1
        if index >= len(buf):
            raise UnterminatedSequenceError(
                f"No terminating byte after offset {offset}, not a LEB128 buffer"
            )
    return index


def encode_groups(value: int, length: int = 1) -> bytes:
    """
    Split a non-negative integer into continuation-flagged 7-bit groups.

    No range checks are done here. At least length bytes are emitted,
    padding with empty groups once the value is exhausted.
    """
    result = []
    while True:
        byte = value & LOWER_7
        value >>= 7
        if value or len(result) + 1 < length:
            byte |= UPPER_1
        result.append(byte)
        if not byte & UPPER_1:
            break
    return bytes(result)


def decode_groups(buf, offset: int = 0) -> Tuple[int, int]:
    """
    Join the 7-bit groups of the varint at offset.

    Returns:
        Tuple of (value, number of bytes including the terminator)
    """
    end = scan_terminator(buf, offset)
    value = 0
    shift = 0
    for index in range(offset, end + 1):
        value |= (buf[index] & LOWER_7) << shift
        shift += 7
    return value, end - offset + 1


class UnsignedVarint:
    """Encoder/decoder for non-negative LEB128 integers."""

    @staticmethod
    def encode(value: int) -> bytes:
        """
        Encode a non-negative integer.

        Args:
            value: Non-negative safe integer

        Returns:
            Minimal varint-encoded bytes

        Raises:
            InvalidInputError: If value is not a safe integer
            SignMismatchError: If value is negative
        """
        check_safe_integer(value)
        if value < 0:
            raise SignMismatchError(f"An unsigned value must not be negative, got {value}")

        return encode_groups(value)

    @staticmethod
    def decode(buf, offset: int = 0) -> int:
        """
        Decode the varint starting at offset.

        Bytes after the terminator are ignored.

        Raises:
            BufferBoundsError: If offset is out of range
            UnterminatedSequenceError: If buf ends before a terminator
        """
        value, _ = decode_groups(buf, offset)
        return value

    @staticmethod
    def get_length(buf, offset: int = 0) -> int:
        """Return how many bytes the varint at offset occupies."""
        return scan_terminator(buf, offset) - offset + 1
