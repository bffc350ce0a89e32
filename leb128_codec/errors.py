# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the LEB128 codec.

Every error derives from Leb128Error, which is a ValueError, so callers
that only care about "bad varint" can keep catching ValueError.
"""


class Leb128Error(ValueError):
    """Base exception for codec errors."""
    pass


class InvalidInputError(Leb128Error):
    """Value is not an integer in the safe integer range."""
    pass


class SignMismatchError(Leb128Error):
    """Value sign does not match the encoder (unsigned/signed)."""
    pass


class BufferBoundsError(Leb128Error):
    """Read offset lies outside the buffer."""
    pass


class UnterminatedSequenceError(Leb128Error):
    """Buffer ended before a byte with the continuation bit clear."""
    pass
