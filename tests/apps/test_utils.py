#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Grand application utilities test module."""

import sys
from typing import Optional

import click
import pytest

from grand.apps.utils.utils import INT, SIZE, GrandAppError, catch_grand_error
from grand.exceptions import GrandError, GrandRandomnessError
from grand.size import SizeRange


@catch_grand_error
def function_under_test(to_raise: Optional[Exception] = None) -> int:
    """Return 0 or raise the given exception."""
    if to_raise is None:
        return 0
    raise to_raise


@pytest.mark.parametrize(
    "to_raise,exit_code",
    [
        (GrandAppError("failure"), 1),
        (GrandAppError("failure", error_code=4), 4),
        (GrandAppError("failure", error_code=300), 1),
        (AssertionError(), 2),
        (GrandError("failure"), 2),
        (GrandRandomnessError("failure"), 2),
        (IndexError(), 3),
        (KeyboardInterrupt(), 3),
    ],
)
def test_catch_grand_error(to_raise: BaseException, exit_code: int) -> None:
    with pytest.raises(SystemExit) as exc:
        function_under_test(to_raise)  # type: ignore[arg-type]
    assert exc.value.code == exit_code


def test_catch_grand_error_passes_result() -> None:
    assert function_under_test(None) == 0


def test_app_error_message(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit):
        function_under_test(GrandAppError("error generating random size: gone"))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "GrandAppError: error generating random size: gone\n"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("10", 10),
        ("0x10", 16),
        ("0o17", 15),
        ("0b11", 3),
        ("1_000", 1000),
        ("0", 0),
        ("02", 2),
        ("010", 8),
        ("-010", -8),
        ("0_10", 8),
        (7, 7),
    ],
)
def test_int_param(value: str, expected: int) -> None:
    assert INT().convert(value) == expected


@pytest.mark.parametrize(
    "value", ["x", "0x", "1.0", "08", "019", " 5", "5 ", str(sys.maxsize + 1), str(-sys.maxsize - 2)]
)
def test_int_param_invalid(value: str) -> None:
    with pytest.raises(click.BadParameter):
        INT().convert(value)


@pytest.mark.parametrize(
    "value,expected", [("16", SizeRange(16, 16)), ("8-16", SizeRange(8, 16))]
)
def test_size_param(value: str, expected: SizeRange) -> None:
    assert SIZE().convert(value) == expected
    assert SIZE().convert(expected) is expected


@pytest.mark.parametrize(
    "value,message",
    [("x", "parse error"), ("0", "size must be greater than zero"), ("3-2", "size max")],
)
def test_size_param_invalid(value: str, message: str) -> None:
    with pytest.raises(click.BadParameter, match=message):
        SIZE().convert(value)
