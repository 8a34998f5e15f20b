#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Grand - cryptographically secure random byte string generator.

Grand draws random byte strings of a fixed or randomly chosen length from the
operating system's secure random source and renders each one as a line of
text in hexadecimal or one of the base64/base32 variants.

The library can be used directly (see :mod:`grand.size`, :mod:`grand.encodings`
and :mod:`grand.generator`) or through the ``grand`` command line tool.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as _grand_version


def get_grand_version() -> Version:
    """Get Grand version information.

    :return: Parsed version object.
    """
    return parse(_grand_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_grand_version()

__license__ = "BSD-3-Clause"
__version__ = str(version)


# The Grand behavior settings
GRAND_VERSION_BASE = version.base_version
GRAND_PLATFORM_DIRS = PlatformDirs(appname="grand", version=GRAND_VERSION_BASE)

# the rotating debug log file is written only when GRAND_DEBUG_LOGGING is set
GRAND_DEBUG_LOGGING = value_to_bool(os.environ.get("GRAND_DEBUG_LOGGING"))
GRAND_DEBUG_LOG_FILE = os.environ.get(
    "GRAND_DEBUG_LOG_FILE", os.path.join(GRAND_PLATFORM_DIRS.user_log_dir, "debug.log")
)
