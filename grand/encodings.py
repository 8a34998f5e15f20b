#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Text encodings for random byte strings.

Every supported encoding is exposed through the same :class:`Encoder`
contract: ``encoded_length(n)`` gives the exact length of the text produced
for ``n`` input bytes and ``encode(dst, src)`` writes that text into a
caller-supplied buffer. Hex is just another encoder with a fixed expansion
ratio and no padding variant.

Encoders are stateless and shared; :func:`get_encoder` resolves an encoding
name to its encoder instance.
"""

import base64
import binascii
from abc import ABC, abstractmethod
from typing import Union

from grand.exceptions import GrandKeyError, GrandLengthError
from grand.utils.grand_enum import GrandEnum

ByteString = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


class Encoder(ABC):
    """Encoder of byte strings into printable text."""

    @abstractmethod
    def encoded_length(self, length: int) -> int:
        """Get exact length of the encoded text.

        :param length: Number of input bytes.
        :return: Number of characters produced by :meth:`encode`.
        """

    @abstractmethod
    def _encode(self, src: ByteString) -> bytes:
        """Encode source bytes into ASCII text."""

    def encode(self, dst: WritableBuffer, src: ByteString) -> None:
        """Encode source bytes into the destination buffer.

        Exactly ``encoded_length(len(src))`` bytes at the start of ``dst`` are
        written, the rest of the buffer is left untouched.

        :param dst: Destination buffer, at least ``encoded_length(len(src))`` bytes long.
        :param src: Bytes to encode.
        :raises GrandLengthError: Destination buffer is too short.
        """
        length = self.encoded_length(len(src))
        if len(dst) < length:
            raise GrandLengthError(
                f"Destination buffer of {len(dst)} bytes is too short, {length} bytes needed"
            )
        dst[:length] = self._encode(src)


class HexEncoder(Encoder):
    """Base16 encoder with lower case digits."""

    def encoded_length(self, length: int) -> int:
        return length * 2

    def _encode(self, src: ByteString) -> bytes:
        return binascii.hexlify(src)

    def __repr__(self) -> str:
        return "HexEncoder()"


class Base64Encoder(Encoder):
    """Base64 encoder, RFC 4648 standard or URL-safe alphabet.

    :param url_safe: Use the URL and filename safe alphabet.
    :param padding: Pad the output with ``=`` to a multiple of 4 characters.
    """

    def __init__(self, url_safe: bool = False, padding: bool = True) -> None:
        self.url_safe = url_safe
        self.padding = padding

    def encoded_length(self, length: int) -> int:
        if self.padding:
            return (length + 2) // 3 * 4
        return (length * 8 + 5) // 6

    def _encode(self, src: ByteString) -> bytes:
        encoded = base64.urlsafe_b64encode(src) if self.url_safe else base64.b64encode(src)
        return encoded if self.padding else encoded.rstrip(b"=")

    def __repr__(self) -> str:
        return f"Base64Encoder(url_safe={self.url_safe}, padding={self.padding})"


class Base32Encoder(Encoder):
    """Base32 encoder, RFC 4648 standard or extended hex alphabet.

    :param extended_hex: Use the "base32hex" alphabet (0-9, A-V).
    :param padding: Pad the output with ``=`` to a multiple of 8 characters.
    """

    def __init__(self, extended_hex: bool = False, padding: bool = True) -> None:
        self.extended_hex = extended_hex
        self.padding = padding

    def encoded_length(self, length: int) -> int:
        if self.padding:
            return (length + 4) // 5 * 8
        return (length * 8 + 4) // 5

    def _encode(self, src: ByteString) -> bytes:
        encoded = base64.b32hexencode(src) if self.extended_hex else base64.b32encode(src)
        return encoded if self.padding else encoded.rstrip(b"=")

    def __repr__(self) -> str:
        return f"Base32Encoder(extended_hex={self.extended_hex}, padding={self.padding})"


class EncodingType(GrandEnum):
    """Supported output encodings."""

    HEX = ("hex", "base16")
    B64S = ("b64s", "base64, standard alphabet")
    B64SR = ("b64sr", "base64, standard alphabet, no padding")
    B64U = ("b64u", "base64, url safe alphabet")
    B64UR = ("b64ur", "base64, url safe alphabet, no padding")
    B32S = ("b32s", "base32, standard alphabet")
    B32SR = ("b32sr", "base32, standard alphabet, no padding")
    B32H = ("b32h", "base32, extended hex alphabet")
    B32HR = ("b32hr", "base32, extended hex alphabet, no padding")


DEFAULT_ENCODING = EncodingType.HEX

ENCODERS: dict[EncodingType, Encoder] = {
    EncodingType.HEX: HexEncoder(),
    EncodingType.B64S: Base64Encoder(),
    EncodingType.B64SR: Base64Encoder(padding=False),
    EncodingType.B64U: Base64Encoder(url_safe=True),
    EncodingType.B64UR: Base64Encoder(url_safe=True, padding=False),
    EncodingType.B32S: Base32Encoder(),
    EncodingType.B32SR: Base32Encoder(padding=False),
    EncodingType.B32H: Base32Encoder(extended_hex=True),
    EncodingType.B32HR: Base32Encoder(extended_hex=True, padding=False),
}


def get_supported_encodings() -> list[str]:
    """Get names of all supported encodings.

    :return: Encoding names in registration order.
    """
    return EncodingType.labels()


def get_encoder(name: str) -> Encoder:
    """Resolve encoding name to its encoder.

    :param name: Encoding name, exact and case-sensitive.
    :raises GrandKeyError: Encoding with given name is not supported.
    :return: Shared encoder instance.
    """
    try:
        encoding = EncodingType.from_label(name)
    except GrandKeyError as exc:
        raise GrandKeyError("encoding not found") from exc
    return ENCODERS[encoding]
