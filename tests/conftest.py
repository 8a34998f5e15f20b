#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Grand pytest configuration and shared test fixtures."""

import base64
import binascii
import logging
import os
from typing import Callable, Iterator

import pytest

from tests.cli_runner import CLICK_HAS_MIX_STDERR, CliRunner

os.environ.pop("GRAND_DEBUG_LOGGING", None)


def _b64decode(url_safe: bool) -> Callable[[str], bytes]:
    def decode(text: str) -> bytes:
        text += "=" * (-len(text) % 4)
        if url_safe:
            return base64.urlsafe_b64decode(text)
        return base64.b64decode(text, validate=True)

    return decode


def _b32decode(extended_hex: bool) -> Callable[[str], bytes]:
    def decode(text: str) -> bytes:
        text += "=" * (-len(text) % 8)
        if extended_hex:
            return base64.b32hexdecode(text)
        return base64.b32decode(text)

    return decode


DECODERS: dict[str, Callable[[str], bytes]] = {
    "hex": binascii.unhexlify,
    "b64s": _b64decode(url_safe=False),
    "b64sr": _b64decode(url_safe=False),
    "b64u": _b64decode(url_safe=True),
    "b64ur": _b64decode(url_safe=True),
    "b32s": _b32decode(extended_hex=False),
    "b32sr": _b32decode(extended_hex=False),
    "b32h": _b32decode(extended_hex=True),
    "b32hr": _b32decode(extended_hex=True),
}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance with stdout separated from stderr.

    :return: CliRunner instance for testing CLI commands.
    """
    if CLICK_HAS_MIX_STDERR:
        return CliRunner(mix_stderr=False)  # type: ignore[call-arg]
    return CliRunner()


@pytest.fixture
def decoders() -> dict[str, Callable[[str], bytes]]:
    """Get reference decoders for all encoding names."""
    return DECODERS


@pytest.fixture(autouse=True)
def reset_grand_logger() -> Iterator[None]:
    """Drop log handlers installed by applications during a test."""
    yield
    grand_logger = logging.getLogger("grand")
    for handler in list(grand_logger.handlers):
        grand_logger.removeHandler(handler)
