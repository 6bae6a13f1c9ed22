#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Synchronous probe command execution used during discovery."""

from __future__ import annotations

from collections.abc import Sequence
import os

from provide.foundation.errors import ProcessError
from provide.foundation.logger import get_logger
from provide.foundation.process import run

from phpharness.errors import CommandError

log = get_logger(__name__)


def _as_bytes(output: bytes | str | None) -> bytes:
    if output is None:
        return b""
    return output.encode("utf-8") if isinstance(output, str) else output


def execute_command(argv: Sequence[str]) -> str:
    """Run ``argv`` to completion and return its stdout with whitespace trimmed.

    Raises:
        CommandError: If the program cannot be spawned, exits non-zero, or
            its output cannot be decoded as text.
    """
    command = [str(arg) for arg in argv]
    if not command:
        raise CommandError("Empty command", command)

    # The child inherits the full environment so PHPRC and PHP_INI_SCAN_DIR apply.
    try:
        result = run(command, check=False, text=False, env=dict(os.environ))
    except (ProcessError, OSError) as e:
        log.error("Failed to spawn probe command", command=command, error=str(e))
        raise CommandError(f"Failed to execute command ({e})", command) from e

    stderr = _as_bytes(result.stderr).decode("utf-8", errors="replace")
    try:
        stdout = _as_bytes(result.stdout).decode("utf-8")
    except UnicodeDecodeError as e:
        log.error("Probe command produced non-text output", command=command, error=str(e))
        raise CommandError("Command output is not valid text", command) from e

    log.debug("Ran probe command", command=command, returncode=result.returncode)

    if result.returncode != 0:
        log.error(
            "Probe command failed",
            command=command,
            returncode=result.returncode,
            stderr=stderr.strip(),
        )
        raise CommandError("Command failed", command, result.returncode, stderr.strip())

    return stdout.strip()


# 🔼⚙️🔚
