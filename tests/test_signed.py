# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for signed (negative) varint encoding/decoding."""

import pytest
from unittest.mock import patch

from leb128_codec.errors import (
    BufferBoundsError,
    InvalidInputError,
    SignMismatchError,
    UnterminatedSequenceError,
)
from leb128_codec.safe_integer import MIN_SAFE_INTEGER
from leb128_codec.signed import SignedVarint
from leb128_codec.unsigned import UnsignedVarint, scan_terminator


class TestSignedEncode:
    """Tests for SignedVarint.encode."""

    @pytest.mark.parametrize("value,expected", [
        (-1, b"\x7F"),
        (-2, b"\x7E"),
        (-5, b"\x7B"),
        (-64, b"\x40"),
        (-65, b"\x3F"),
        (-128, b"\x00"),
        (-129, b"\xFF\x7E"),
        (-16384, b"\x80\x00"),
        (-16385, b"\xFF\xFF\x7E"),
    ])
    def test_known_values(self, value, expected):
        """Biased magnitudes for small negatives."""
        assert SignedVarint.encode(value) == expected

    def test_length_follows_magnitude(self):
        """One byte per 7 bits of -value rounded up, at least one byte."""
        assert len(SignedVarint.encode(-1)) == 1
        assert len(SignedVarint.encode(-128)) == 1
        assert len(SignedVarint.encode(-129)) == 2
        assert len(SignedVarint.encode(-(2**14))) == 2
        assert len(SignedVarint.encode(-(2**14) - 1)) == 3

    def test_min_safe_integer(self):
        """Most negative safe integer takes eight bytes."""
        assert len(SignedVarint.encode(MIN_SAFE_INTEGER)) == 8

    @pytest.mark.parametrize("value", [0, 1, 127, 2**40])
    def test_non_negative_raises(self, value):
        """Zero and positive values raise SignMismatchError."""
        with pytest.raises(SignMismatchError, match="must be negative"):
            SignedVarint.encode(value)

    @pytest.mark.parametrize("value", [
        -1.5, -1.0, "-1", None, False, MIN_SAFE_INTEGER - 1,
    ])
    def test_invalid_input_raises(self, value):
        """Non safe integers raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            SignedVarint.encode(value)


class TestSignedDecode:
    """Tests for SignedVarint.decode."""

    def test_known_values(self):
        """Known encodings decode to negatives."""
        assert SignedVarint.decode(b"\x7F") == -1
        assert SignedVarint.decode(b"\x00") == -128
        assert SignedVarint.decode(b"\xFF\x7E") == -129
        assert SignedVarint.decode(b"\x80\x00") == -16384

    def test_always_negative(self):
        """Every terminated buffer decodes to a negative value."""
        for byte in range(128):
            assert SignedVarint.decode(bytes([byte])) < 0
        assert SignedVarint.decode(b"\xFF\xFF\xFF\x7F") < 0

    def test_with_offset(self):
        """Prefix bytes are skipped with offset."""
        data = b"\x01\x02\x03" + SignedVarint.encode(-123456)
        assert SignedVarint.decode(data, 3) == -123456

    def test_with_trailing_data(self):
        """Trailing data does not change the width."""
        assert SignedVarint.decode(b"\x7F\x80\x80\x01") == -1

    def test_unterminated_raises(self):
        """Buffer without a terminator raises."""
        with pytest.raises(UnterminatedSequenceError):
            SignedVarint.decode(b"\xFF\x80\xE8")

    def test_single_scan(self):
        """Value and width come from one terminator scan."""
        with patch('leb128_codec.unsigned.scan_terminator',
                   wraps=scan_terminator) as mock_scan:
            assert SignedVarint.decode(b"\x00\xFF\x7E", 1) == -129
        mock_scan.assert_called_once_with(b"\x00\xFF\x7E", 1)

    def test_offset_out_of_range_raises(self):
        """Bad offsets raise BufferBoundsError."""
        with pytest.raises(BufferBoundsError):
            SignedVarint.decode(b"\x7F", 1)


class TestSignedRoundtrip:
    """Roundtrip tests for encode/decode."""

    def test_small_values(self):
        """Every value down to -20000 roundtrips."""
        for value in range(-1, -20001, -1):
            assert SignedVarint.decode(SignedVarint.encode(value)) == value

    def test_power_of_two_boundaries(self):
        """-2**i and its neighbours roundtrip for every bit width."""
        for i in range(54):
            for value in (-(2**i) + 1, -(2**i), -(2**i) - 1):
                if value >= 0 or value < MIN_SAFE_INTEGER:
                    continue
                encoded = SignedVarint.encode(value)
                assert SignedVarint.decode(encoded) == value, value

    def test_seven_bit_boundaries(self):
        """Values around each 7-bit width change roundtrip."""
        for width in range(7, 57, 7):
            for value in (-(2**(width - 1)), -(2**width), -(2**width) + 1,
                          -(2**width) - 1):
                if value < MIN_SAFE_INTEGER:
                    continue
                assert SignedVarint.decode(SignedVarint.encode(value)) == value

    def test_sampled_range(self):
        """A spread of values across the safe range roundtrips."""
        step = -MIN_SAFE_INTEGER // 997
        for value in range(-1, MIN_SAFE_INTEGER, -step):
            assert SignedVarint.decode(SignedVarint.encode(value)) == value

    def test_min_safe_integer(self):
        """Most negative safe integer roundtrips."""
        encoded = SignedVarint.encode(MIN_SAFE_INTEGER)
        assert SignedVarint.decode(encoded) == MIN_SAFE_INTEGER

    def test_encoding_is_valid_unsigned_varint(self):
        """Signed output is a well-formed varint of the same length."""
        encoded = SignedVarint.encode(-300)
        assert UnsignedVarint.get_length(encoded) == len(encoded)
