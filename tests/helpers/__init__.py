#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test helper modules for phpharness testing.

This package contains fake probe commands and checks for a real PHP
installation."""

from __future__ import annotations

# 🔼⚙️🔚
