# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Safe integer checks.

A safe integer is one a double-precision float holds without rounding,
i.e. |value| <= 2**53 - 1. This is the domain the encoders accept.
"""

from .errors import InvalidInputError

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


def is_safe_integer(value) -> bool:
    """
    Check whether a value is a safe integer.

    bool is rejected even though it subclasses int, and so are floats
    with an integral value.

    Args:
        value: Any object

    Returns:
        True if value is an int within the safe range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def check_safe_integer(value) -> int:
    """
    Return value unchanged, or raise if it is not a safe integer.

    Raises:
        InvalidInputError: If value is not a safe integer
    """
    if not is_safe_integer(value):
        raise InvalidInputError(f"{value!r} is not a safe integer")
    return value
