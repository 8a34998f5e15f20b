#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Generation of encoded random byte strings.

The generator owns two scratch buffers sized for the largest possible byte
string: one for raw random bytes and one for their encoding. Both are
overwritten on every draw, so a run of any length allocates them only once.
"""

import logging
from typing import Iterator

from grand.crypto.rng import fill_random
from grand.encodings import Encoder
from grand.exceptions import GrandRandomnessError, GrandValueError
from grand.size import SizeRange, select_size

logger = logging.getLogger(__name__)


class RandomStringGenerator:
    """Generator of random byte strings rendered as text.

    Each string has a size drawn uniformly from the size range and is encoded
    with the given encoder.
    """

    def __init__(self, size_range: SizeRange, encoder: Encoder) -> None:
        """Initialize the generator and allocate its scratch buffers.

        :param size_range: Validated range of byte string sizes.
        :param encoder: Encoder used to render each byte string.
        """
        size_range.validate()
        self.size_range = size_range
        self.encoder = encoder
        self._raw = bytearray(size_range.max)
        self._encoded = bytearray(encoder.encoded_length(size_range.max))
        logger.debug(
            f"Allocated {len(self._raw)} bytes for random data, "
            f"{len(self._encoded)} bytes for encoded data"
        )

    def generate_one(self) -> str:
        """Generate one encoded random byte string.

        :raises GrandRandomnessError: The secure random source failed.
        :return: Encoded random byte string.
        """
        try:
            size = select_size(self.size_range)
        except GrandRandomnessError as exc:
            raise GrandRandomnessError(f"error generating random size: {exc.description}") from exc
        raw = memoryview(self._raw)[:size]
        try:
            fill_random(raw, size)
        except GrandRandomnessError as exc:
            raise GrandRandomnessError(
                f"error generating random byte string: {exc.description}"
            ) from exc
        self.encoder.encode(self._encoded, raw)
        encoded_length = self.encoder.encoded_length(size)
        logger.debug(f"Generated {size} random bytes, {encoded_length} characters encoded")
        return self._encoded[:encoded_length].decode("ascii")

    def generate(self, count: int) -> Iterator[str]:
        """Generate encoded random byte strings one by one.

        Strings are produced lazily in draw order, so each one can be emitted
        before the next is drawn. A failure stops the iteration, strings
        already yielded stay valid.

        :param count: Number of strings to generate, at least one.
        :raises GrandValueError: Count is not positive.
        :raises GrandRandomnessError: The secure random source failed.
        :return: Iterator over encoded strings.
        """
        if count < 1:
            raise GrandValueError("n must be greater than zero")
        logger.info(f"Generating {count} random byte string(s) of size {self.size_range}")
        return (self.generate_one() for _ in range(count))
