#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Isolated PHP invocations that ignore every ini file but the ephemeral one."""

from __future__ import annotations

import os

from provide.foundation.logger import get_logger

from phpharness.ini import TmpConfigFile
from phpharness.models import Context, ContextCommand
from phpharness.utils import path_to_str

log = get_logger(__name__)

# -n: no php.ini and no scan dir; -c: use this ini file instead.
NO_INI_FLAG = "-n"
INI_FILE_FLAG = "-c"


def create_command_with_tmp_php_ini_args(
    tmp_php_ini_file: TmpConfigFile | str | os.PathLike[str],
    script: str | os.PathLike[str],
    context: Context | None = None,
) -> ContextCommand:
    """Build ``php -n -c <ini> <script>`` for the discovered binary.

    Nothing is spawned here; call :meth:`ContextCommand.run` or pass
    :attr:`ContextCommand.argv` to a process runner.

    Raises:
        PathEncodingError: If either path cannot be represented as text.
    """
    if context is None:
        from phpharness.context import get_global

        context = get_global()

    args = (
        NO_INI_FLAG,
        INI_FILE_FLAG,
        path_to_str(tmp_php_ini_file),
        path_to_str(script),
    )
    log.debug("Built isolated PHP invocation", php_bin=context.php_bin, args=list(args))
    return ContextCommand(program=context.php_bin, args=args)


# 🔼⚙️🔚
