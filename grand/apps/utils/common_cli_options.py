#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, Optional, TypeVar, Union

import click

from grand import __version__ as grand_version
from grand.apps.utils.utils import INT, SIZE
from grand.encodings import (
    DEFAULT_ENCODING,
    Encoder,
    EncodingType,
    get_encoder,
    get_supported_encodings,
)
from grand.exceptions import GrandKeyError

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])
logger = logging.getLogger(__name__)

DEFAULT_SIZE = "16"
DEFAULT_COUNT = 1


class EncodingChoice(click.Choice):
    """Choice of encoding name, converted to its encoder.

    Names are matched exactly and case-sensitively.
    """

    def __init__(self) -> None:
        super().__init__(get_supported_encodings(), case_sensitive=True)

    def __repr__(self) -> str:
        return f"EncodingChoice({list(self.choices)})"

    # pylint: disable=inconsistent-return-statements
    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> Encoder:
        """Resolve encoding name to its encoder."""
        if isinstance(value, Encoder):
            return value
        try:
            return get_encoder(value)
        except GrandKeyError as exc:
            self.fail(f"{value!r}: {exc.description}", param, ctx)


def _encoding_help() -> str:
    lines = [f'  "{item.label}" - {item.description}' for item in EncodingType]
    return "\b\nOutput encoding; one of:\n" + "\n".join(lines)


def _check_count(ctx: click.Context, param: click.Parameter, value: int) -> int:
    if value < 1:
        raise click.BadParameter(f"{value}: n must be greater than zero", ctx=ctx, param=param)
    return value


def grand_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(grand_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def grand_generator_options(options: FC) -> FC:
    """Random byte string generator options.

    Provides: `encoder: Encoder`, `size_range: SizeRange` and `count: int`.

    :return: click decorator
    """
    options = click.option(
        "-n",
        "--count",
        type=INT(),
        default=DEFAULT_COUNT,
        show_default=True,
        callback=_check_count,
        help="Number of random byte strings to generate.",
    )(options)
    options = click.option(
        "-s",
        "--size",
        "size_range",
        type=SIZE(),
        default=DEFAULT_SIZE,
        show_default=True,
        help=(
            "Size of random byte strings; an integer or an inclusive range, e.g. "
            '"16-32" (if a range is specified, the size of each byte string will be '
            "a cryptographically-secure random number in the range)."
        ),
    )(options)
    options = click.option(
        "-e",
        "--encoding",
        "encoder",
        type=EncodingChoice(),
        default=DEFAULT_ENCODING.label,
        show_default=True,
        metavar="ENCODING",
        help=_encoding_help(),
    )(options)
    return options
