# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 varint codec - Python library.

This package encodes and decodes unsigned and negative integers as
LEB128 varints, and can move them over a serial port.

Example usage:
    from leb128_codec import Varint, decode_varint

    data = Varint.encode(300) + Varint.encode(-5)
    value, offset = decode_varint(data)           # 300, 2
    value, offset = decode_varint(data, offset, signed=True)  # -5, 3

    with Transport("/dev/ttyACM0") as transport:
        transport.write_varint(300)
        print(transport.read_varint())
"""

from .errors import (
    Leb128Error,
    InvalidInputError,
    SignMismatchError,
    BufferBoundsError,
    UnterminatedSequenceError,
)
from .safe_integer import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    is_safe_integer,
    check_safe_integer,
)
from .unsigned import UnsignedVarint, scan_terminator
from .signed import SignedVarint
from .varint import Varint, encode_varint, decode_varint, iter_varints
from .transport import (
    Transport,
    TransportError,
    TimeoutError,
    ProtocolError,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "Leb128Error",
    "InvalidInputError",
    "SignMismatchError",
    "BufferBoundsError",
    "UnterminatedSequenceError",
    # Safe integers
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "is_safe_integer",
    "check_safe_integer",
    # Codecs
    "UnsignedVarint",
    "SignedVarint",
    "Varint",
    "scan_terminator",
    "encode_varint",
    "decode_varint",
    "iter_varints",
    # Transport
    "Transport",
    "TransportError",
    "TimeoutError",
    "ProtocolError",
]
