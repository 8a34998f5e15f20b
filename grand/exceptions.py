#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Grand exception classes.

All errors raised by the library derive from :class:`GrandError`, so callers
can handle them in one place, while still being catchable as the matching
builtin exception (``ValueError``, ``KeyError``, ``IOError``).
"""

from typing import Optional


class GrandError(Exception):
    """Grand Base Exception.

    :cvar fmt: Default error message format template.
    """

    fmt = "GRAND: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base Grand Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        return self.fmt.format(description=self.description or "Unknown Error")


class GrandKeyError(GrandError, KeyError):
    """Lookup of a name that is not registered."""


class GrandValueError(GrandError, ValueError):
    """Grand standard value error."""


class GrandParsingError(GrandError):
    """Input text could not be parsed."""


class GrandLengthError(GrandError, ValueError):
    """Buffer is too short for the requested operation."""


class GrandIOError(GrandError, IOError):
    """Grand standard IO error."""


class GrandRandomnessError(GrandIOError):
    """The secure random source failed or returned fewer bytes than requested.

    This error is fatal; the source is not assumed to recover within one run.
    """
