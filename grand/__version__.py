#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2024-2025 Grand developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Grand version."""

__version__ = "1.2.0"
