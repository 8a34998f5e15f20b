#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the random string generator."""

from typing import Callable

import pytest

from grand import generator as generator_module
from grand.crypto import rng
from grand.encodings import get_encoder, get_supported_encodings
from grand.exceptions import GrandRandomnessError, GrandValueError
from grand.generator import RandomStringGenerator
from grand.size import SizeRange


@pytest.mark.parametrize("name", get_supported_encodings())
def test_generate_sizes(name: str, decoders: dict[str, Callable[[str], bytes]]) -> None:
    generator = RandomStringGenerator(SizeRange(1, 24), get_encoder(name))
    for line in generator.generate(200):
        assert 1 <= len(decoders[name](line)) <= 24


def test_generate_fixed_size() -> None:
    generator = RandomStringGenerator(SizeRange(8, 8), get_encoder("hex"))
    lines = list(generator.generate(5))
    assert len(lines) == 5
    assert all(len(line) == 16 for line in lines)
    assert len(set(lines)) == 5


def test_buffers_sized_for_maximum() -> None:
    encoder = get_encoder("b32s")
    generator = RandomStringGenerator(SizeRange(3, 17), encoder)
    raw, encoded = generator._raw, generator._encoded
    assert len(raw) == 17
    assert len(encoded) == encoder.encoded_length(17)
    list(generator.generate(50))
    assert generator._raw is raw
    assert generator._encoded is encoded
    assert len(raw) == 17


def test_short_string_uses_exact_slice(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leftover bytes of a longer previous draw never leak into the output."""
    sizes = iter([16, 1])
    monkeypatch.setattr(generator_module, "select_size", lambda size_range: next(sizes))
    generator = RandomStringGenerator(SizeRange(1, 16), get_encoder("b64s"))
    assert len(generator.generate_one()) == 24
    assert len(generator.generate_one()) == 4


@pytest.mark.parametrize("count", [0, -1])
def test_generate_invalid_count(count: int) -> None:
    generator = RandomStringGenerator(SizeRange(1, 1), get_encoder("hex"))
    with pytest.raises(GrandValueError):
        generator.generate(count)


def test_invalid_size_range() -> None:
    with pytest.raises(GrandValueError):
        RandomStringGenerator(SizeRange(2, 1), get_encoder("hex"))


def test_generate_is_lazy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strings already produced survive a failure of a later draw."""
    calls = []

    def token_bytes(length: int) -> bytes:
        calls.append(length)
        if len(calls) > 2:
            raise OSError("entropy source gone")
        return bytes(length)

    monkeypatch.setattr(rng, "token_bytes", token_bytes)
    generator = RandomStringGenerator(SizeRange(4, 4), get_encoder("hex"))
    lines = generator.generate(5)
    assert calls == []
    assert next(lines) == "00000000"
    assert next(lines) == "00000000"
    with pytest.raises(GrandRandomnessError, match="error generating random byte string"):
        next(lines)


def test_size_draw_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def randbelow(upper_bound: int) -> int:
        raise OSError("entropy source gone")

    monkeypatch.setattr(rng, "randbelow", randbelow)
    generator = RandomStringGenerator(SizeRange(1, 2), get_encoder("hex"))
    with pytest.raises(GrandRandomnessError, match="error generating random size"):
        generator.generate_one()
