#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Size specification parsing and random size selection.

A size specification is either a single decimal integer ``"N"`` or an
inclusive range ``"MIN-MAX"``. Parsing yields a validated :class:`SizeRange`,
from which :func:`select_size` draws one length per generated byte string.
"""

import re
import sys
from dataclasses import dataclass

from grand.crypto.rng import rand_below
from grand.exceptions import GrandParsingError, GrandValueError

SIZE_RANGE_SEPARATOR = "-"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class SizeRange:
    """Inclusive range of byte string sizes.

    Instances are only valid when ``1 <= min <= max``; use :func:`parse_size`
    or :meth:`validate` to obtain one.
    """

    min: int
    max: int

    @property
    def is_fixed(self) -> bool:
        """True when the range holds a single size."""
        return self.min == self.max

    def validate(self, is_range: bool = True) -> None:
        """Validate range bounds.

        :param is_range: The range was given as ``MIN-MAX``, selects the error message.
        :raises GrandValueError: Minimum is not positive or maximum is below minimum.
        """
        if self.min < 1:
            if is_range:
                raise GrandValueError("size min must be greater than zero")
            raise GrandValueError("size must be greater than zero")
        if self.max < self.min:
            raise GrandValueError("size max must not be less than size min")

    def __str__(self) -> str:
        if self.is_fixed:
            return str(self.min)
        return f"{self.min}{SIZE_RANGE_SEPARATOR}{self.max}"


def _parse_int(value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise GrandParsingError("parse error")
    number = int(value)
    if not -sys.maxsize - 1 <= number <= sys.maxsize:
        raise GrandParsingError("parse error")
    return number


def parse_size(size: str) -> SizeRange:
    """Parse and validate size specification.

    The value is cut on the first dash. Without a dash it is a single size,
    otherwise both halves are parsed independently as range bounds.

    :param size: Size specification, e.g. ``"16"`` or ``"16-32"``.
    :raises GrandParsingError: Any part is not a decimal integer.
    :raises GrandValueError: Bounds are out of order or not positive.
    :return: Validated size range.
    """
    size_min_str, separator, size_max_str = size.partition(SIZE_RANGE_SEPARATOR)
    is_range = bool(separator)
    size_min = _parse_int(size_min_str)
    size_max = _parse_int(size_max_str) if is_range else size_min

    size_range = SizeRange(min=size_min, max=size_max)
    size_range.validate(is_range=is_range)
    return size_range


def select_size(size_range: SizeRange) -> int:
    """Select size uniformly from the inclusive range.

    A fixed range returns its size without consuming any entropy.

    :param size_range: Validated size range.
    :raises GrandRandomnessError: The secure random source failed.
    :return: Size in ``[size_range.min, size_range.max]``.
    """
    if size_range.is_fixed:
        return size_range.min
    return size_range.min + rand_below(size_range.max - size_range.min + 1)
