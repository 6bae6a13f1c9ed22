#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Running PHP test scripts with the extension under test loaded."""

from __future__ import annotations

from collections.abc import Callable
import os
from typing import TYPE_CHECKING, TypeAlias

from provide.foundation.logger import get_logger

from phpharness.errors import ScriptFailedError
from phpharness.ini import create_tmp_php_ini_file
from phpharness.invocation import create_command_with_tmp_php_ini_args
from phpharness.models import Context

if TYPE_CHECKING:
    from provide.foundation.process import CompletedProcess

log = get_logger(__name__)

ScriptPath: TypeAlias = "str | os.PathLike[str]"
Condition: TypeAlias = "Callable[[CompletedProcess], bool]"


def _succeeded(result: CompletedProcess) -> bool:
    return result.returncode == 0 and not (result.stderr or "").strip()


def check_php_scripts_with_condition(
    lib_path: str | os.PathLike[str],
    *scripts: tuple[ScriptPath, Condition],
    context: Context | None = None,
) -> None:
    """Run each script with the extension loaded and check it with its condition.

    All scripts share one ephemeral ini file, removed when this returns or raises.

    Raises:
        ScriptFailedError: On the first script whose condition returns False.
    """
    if context is None:
        from phpharness.context import get_global

        context = get_global()

    with create_tmp_php_ini_file(lib_path, context=context) as ini:
        for script, condition in scripts:
            command = create_command_with_tmp_php_ini_args(ini, script, context=context)
            result = command.run()
            log.info(
                "Ran PHP script",
                script=os.fspath(script),
                returncode=result.returncode,
            )
            if not condition(result):
                log.error(
                    "PHP script check failed",
                    script=os.fspath(script),
                    returncode=result.returncode,
                    stderr=result.stderr,
                )
                raise ScriptFailedError(
                    "PHP script check failed",
                    command.argv,
                    result.stdout or "",
                    result.stderr or "",
                )


def check_php_scripts(
    lib_path: str | os.PathLike[str],
    *scripts: ScriptPath,
    context: Context | None = None,
) -> None:
    """Run each script with the extension loaded; each must exit 0 without stderr output."""
    check_php_scripts_with_condition(
        lib_path,
        *((script, _succeeded) for script in scripts),
        context=context,
    )


# 🔼⚙️🔚
