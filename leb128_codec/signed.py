# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signed (negative) LEB128 encoding/decoding.

A negative value v is sent as the unsigned varint (1 << b) + v, where b
is the bit width of -v rounded up to a multiple of 7. The encoding always
takes exactly b / 7 bytes, so the decoder recovers b from the length.
"""

from .errors import SignMismatchError
from .safe_integer import check_safe_integer
from .unsigned import decode_groups, encode_groups


def _aligned_width(magnitude: int) -> int:
    """Smallest multiple of 7 (at least 7) with magnitude <= 2**width."""
    # (m - 1).bit_length() == ceil(log2(m)) for m >= 1
    bits = (magnitude - 1).bit_length()
    return max(7, -(-bits // 7) * 7)


class SignedVarint:
    """Encoder/decoder for negative LEB128 integers."""

    @staticmethod
    def encode(value: int) -> bytes:
        """
        Encode a negative integer.

        Args:
            value: Negative safe integer

        Returns:
            Varint-encoded bytes of the biased magnitude

        Raises:
            InvalidInputError: If value is not a safe integer
            SignMismatchError: If value is zero or positive
        """
        check_safe_integer(value)
        if value >= 0:
            raise SignMismatchError(f"A signed value must be negative, got {value}")

        width = _aligned_width(-value)
        # The biased magnitude can exceed the safe range, so skip the
        # unsigned encoder's checks.
        return encode_groups((1 << width) + value, width // 7)

    @staticmethod
    def decode(buf, offset: int = 0) -> int:
        """
        Decode a negative integer starting at offset.

        Raises:
            BufferBoundsError: If offset is out of range
            UnterminatedSequenceError: If buf ends before a terminator
        """
        biased, length = decode_groups(buf, offset)
        return -((1 << (7 * length)) - biased)
