#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Grand cryptographic random number generation utilities.

This module provides secure random number and byte generation functions.
It wraps Python's secrets module and turns every failure of the operating
system's random source into :class:`GrandRandomnessError`.
"""

# Used security modules


from secrets import randbelow, token_bytes
from typing import Union

from grand.exceptions import GrandRandomnessError, GrandValueError

WritableBuffer = Union[bytearray, memoryview]


def random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes.

    :param length: The number of random bytes to generate.
    :raises GrandValueError: If length is negative.
    :raises GrandRandomnessError: If the random source fails or returns fewer bytes.
    :return: Cryptographically secure random bytes of specified length.
    """
    if length < 0:
        raise GrandValueError(f"Random data length must not be negative: {length}")
    try:
        data = token_bytes(length)
    except (OSError, NotImplementedError) as exc:
        raise GrandRandomnessError(str(exc)) from exc
    if len(data) != length:
        raise GrandRandomnessError(f"short read: got {len(data)} bytes, want {length}")
    return data


def fill_random(buffer: WritableBuffer, length: int) -> None:
    """Fill the first ``length`` bytes of the buffer with secure random data.

    The buffer is written in place and never resized; bytes beyond ``length``
    keep their previous content.

    :param buffer: Writable buffer, at least ``length`` bytes long.
    :param length: Number of bytes to fill.
    :raises GrandValueError: If the buffer is shorter than ``length``.
    :raises GrandRandomnessError: If the random source fails or returns fewer bytes.
    """
    if length > len(buffer):
        raise GrandValueError(f"Buffer of {len(buffer)} bytes cannot hold {length} bytes")
    buffer[:length] = random_bytes(length)


def rand_below(upper_bound: int) -> int:
    """Generate a random integer in the range [0, upper_bound).

    The draw is unbiased over the exact range width.

    :param upper_bound: Exclusive upper bound, must be positive.
    :raises GrandValueError: If upper_bound is not positive.
    :raises GrandRandomnessError: If the random source fails.
    :return: Random integer between 0 and upper_bound - 1.
    """
    if upper_bound <= 0:
        raise GrandValueError(f"Upper bound must be positive: {upper_bound}")
    try:
        return randbelow(upper_bound)
    except (OSError, NotImplementedError) as exc:
        raise GrandRandomnessError(str(exc)) from exc
