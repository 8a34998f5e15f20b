#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Console script generating cryptographically secure random byte strings."""

import logging
import sys

import click

from grand.apps.utils import grand_logger
from grand.apps.utils.common_cli_options import (
    grand_apps_common_options,
    grand_generator_options,
)
from grand.apps.utils.utils import GrandAppError, catch_grand_error
from grand.encodings import Encoder
from grand.exceptions import GrandRandomnessError
from grand.generator import RandomStringGenerator
from grand.size import SizeRange

logger = logging.getLogger(__name__)


@click.command(name="grand", no_args_is_help=False)
@grand_apps_common_options
@grand_generator_options
def main(log_level: int, encoder: Encoder, size_range: SizeRange, count: int) -> None:
    """Grand generates cryptographically-secure random byte strings.

    Each byte string is printed on its own line in the selected encoding.
    """
    grand_logger.install(level=log_level)
    logger.debug(f"Encoder: {encoder!r}, size: {size_range}, count: {count}")

    generator = RandomStringGenerator(size_range, encoder)
    try:
        for line in generator.generate(count):
            click.echo(line)
    except GrandRandomnessError as exc:
        raise GrandAppError(exc.description, error_code=1) from exc


@catch_grand_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
