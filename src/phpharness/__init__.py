#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Isolated PHP interpreter contexts for testing PHP extensions.

Re-exports the public harness API."""

from provide.foundation.utils.versioning import get_version

from phpharness.context import Context, ContextCommand, OnceCell, get_global
from phpharness.errors import (
    CommandError,
    ConfigReadError,
    DiscoveryError,
    HarnessError,
    PathEncodingError,
    ScriptFailedError,
    TempFileError,
)
from phpharness.fpm import create_tmp_fpm_conf_file, find_php_fpm
from phpharness.ini import TmpConfigFile, create_tmp_php_ini_file
from phpharness.invocation import create_command_with_tmp_php_ini_args
from phpharness.scripts import check_php_scripts, check_php_scripts_with_condition

__version__ = get_version("phpharness", caller_file=__file__)

__all__ = [
    "CommandError",
    "ConfigReadError",
    "Context",
    "ContextCommand",
    "DiscoveryError",
    "HarnessError",
    "OnceCell",
    "PathEncodingError",
    "ScriptFailedError",
    "TempFileError",
    "TmpConfigFile",
    "__version__",
    "check_php_scripts",
    "check_php_scripts_with_condition",
    "create_command_with_tmp_php_ini_args",
    "create_tmp_fpm_conf_file",
    "create_tmp_php_ini_file",
    "find_php_fpm",
    "get_global",
]

# 🔼⚙️🔚
