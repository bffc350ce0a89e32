# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (LEB128), signed and unsigned.

The wire format does not say whether a varint is signed. Encoding picks
the scheme from the sign of the value; decoding needs the caller to say
which scheme was used.
"""

from typing import Iterator, Tuple

from .safe_integer import check_safe_integer
from .signed import SignedVarint
from .unsigned import UnsignedVarint


class Varint:
    """Dispatches to UnsignedVarint or SignedVarint."""

    @staticmethod
    def encode(value: int) -> bytes:
        """
        Encode any safe integer.

        Non-negative values use the unsigned scheme, negative values the
        signed one.

        Raises:
            InvalidInputError: If value is not a safe integer
        """
        check_safe_integer(value)
        if value >= 0:
            return UnsignedVarint.encode(value)
        return SignedVarint.encode(value)

    @staticmethod
    def decode(buf, offset: int = 0, is_signed: bool = False) -> int:
        """
        Decode the varint starting at offset.

        Args:
            buf: Bytes containing the varint
            offset: Starting offset in buf
            is_signed: Whether the varint was encoded as a negative value

        Returns:
            Decoded integer
        """
        if is_signed:
            return SignedVarint.decode(buf, offset)
        return UnsignedVarint.decode(buf, offset)

    @staticmethod
    def get_length(buf, offset: int = 0) -> int:
        """Return how many bytes the varint at offset occupies."""
        return UnsignedVarint.get_length(buf, offset)


def encode_varint(value: int) -> bytes:
    """
    Encode an integer as a varint.

    Args:
        value: Safe integer to encode

    Returns:
        Varint-encoded bytes
    """
    return Varint.encode(value)


def decode_varint(data: bytes, offset: int = 0, signed: bool = False) -> Tuple[int, int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data
        signed: Whether the varint holds a negative value

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        BufferBoundsError: If offset is outside data
        UnterminatedSequenceError: If varint is truncated
    """
    value = Varint.decode(data, offset, signed)
    return value, offset + Varint.get_length(data, offset)


def iter_varints(data: bytes, offset: int = 0, signed: bool = False) -> Iterator[int]:
    """
    Yield every varint in data from offset to the end.

    An empty buffer read from offset 0 yields nothing. Any other offset
    must point inside data.

    Raises:
        BufferBoundsError: If offset is outside data
        UnterminatedSequenceError: If the last varint is truncated
    """
    if not data and offset == 0:
        return
    while True:
        value, offset = decode_varint(data, offset, signed)
        yield value
        if offset >= len(data):
            break
