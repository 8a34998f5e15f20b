#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Enumeration with label and description for every member.

Labels are the names users type on the command line, so lookup by label is
exact and case-sensitive.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from typing_extensions import Self

from grand.exceptions import GrandKeyError


@dataclass(frozen=True)
class GrandEnumMember:
    """Grand Enum member representation."""

    label: str
    description: Optional[str] = None


class GrandEnum(GrandEnumMember, Enum):
    """Grand enumeration with label based lookup.

    Members compare equal to their label.
    """

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, GrandEnum):
            return self is __value
        return self.label == __value

    def __hash__(self) -> int:
        return hash((self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label.

        :param label: Label to be used for searching, case-sensitive
        :raises GrandKeyError: If enum with given label is not found or label is not string
        :return: Found enum member
        """
        if not isinstance(label, str):
            raise GrandKeyError("Label must be string")
        for item in cls.__members__.values():
            if item.label == label:
                return item
        raise GrandKeyError(f"There is no {cls.__name__} item with label {label} defined")
