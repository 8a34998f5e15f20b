#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Grand application utilities: error handling and click parameter types."""

import logging
import re
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from grand import GRAND_DEBUG_LOG_FILE, GRAND_DEBUG_LOGGING
from grand.exceptions import GrandError
from grand.size import SizeRange, parse_size

logger = logging.getLogger(__name__)

_LEGACY_OCTAL_RE = re.compile(r"[+-]?0[0-9_]+")


class GrandAppError(GrandError):
    """Grand application error.

    Raised by command line tools to stop with a message and an exit code.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


class INT(click.ParamType):
    """Click parameter type for native integers.

    With base 0 the value may use 0x, 0o or 0b prefix, and a leading zero
    selects octal, e.g. "010" is 8. Values outside the native integer range
    are rejected.

    :cvar name: Parameter type name used by Click framework.
    """

    name = "integer"

    def __init__(self, base: int = 0) -> None:
        """Initialize custom INT param class.

        :param base: requested base for the number, defaults to 0
        """
        super().__init__()
        self.base = base

    # pylint: disable=inconsistent-return-statements
    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Perform the conversion str -> int.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: value as integer
        """
        if isinstance(value, int):
            return value
        try:
            if value != value.strip():
                raise ValueError(value)
            if self.base == 0 and _LEGACY_OCTAL_RE.fullmatch(value):
                number = int(value, 8)
            else:
                number = int(value, self.base)
        except (TypeError, AttributeError):
            self.fail(
                "expected string for int() conversion, got "
                f"{value!r} of type {type(value).__name__}",
                param,
                ctx,
            )
        except ValueError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)
        if not -sys.maxsize - 1 <= number <= sys.maxsize:
            self.fail(f"{value!r} is out of range", param, ctx)
        return number


class SIZE(click.ParamType):
    """Click parameter type for size specification: ``N`` or ``MIN-MAX``."""

    name = "size"

    # pylint: disable=inconsistent-return-statements
    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> SizeRange:
        """Parse and validate the size specification.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: Validated size range
        """
        if isinstance(value, SizeRange):
            return value
        try:
            return parse_size(value)
        except GrandError as exc:
            self.fail(f"{value!r}: {exc.description}", param, ctx)


def catch_grand_error(function: Callable) -> Callable:
    """Catch and handle GrandError and other exceptions.

    GrandAppError prints its message and exits with its error code.
    Other GrandError and AssertionError exit with code 2, any other
    exception (including KeyboardInterrupt) with code 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except GrandAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, GrandError) as grand_exc:
            click.echo(f"{grand_exc.__class__.__name__}: {grand_exc}", err=True)
            logger.debug(str(grand_exc), exc_info=True)
            if GRAND_DEBUG_LOGGING:
                click.secho(
                    f"See debug log file: {GRAND_DEBUG_LOG_FILE} for more info",
                    fg="yellow",
                    err=True,
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if GRAND_DEBUG_LOGGING:
                click.secho(
                    f"See debug log file: {GRAND_DEBUG_LOG_FILE} for more info.",
                    fg="yellow",
                    err=True,
                )
            sys.exit(3)

    return wrapper
