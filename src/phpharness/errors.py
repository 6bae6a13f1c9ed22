#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exceptions raised by the PHP test harness.

Everything here is fatal for the current test run. Failing to locate an
FPM binary is not an error and is reported as ``None`` instead."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class HarnessError(Exception):
    """Base exception for harness errors."""


class DiscoveryError(HarnessError):
    """Raised when the PHP binary or its configuration cannot be discovered."""


class CommandError(DiscoveryError):
    """Raised when a probe command cannot be spawned, fails, or prints non-text output."""

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        detail = f"{message}: {' '.join(self.command)}"
        if returncode is not None:
            detail += f" (exit code {returncode})"
        if stderr:
            detail += f"\n{stderr}"
        super().__init__(detail)


class ConfigReadError(HarnessError):
    """Raised when a named ini file exists in PHP's report but cannot be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Failed to read PHP configuration file '{path}': {reason}")


class TempFileError(HarnessError):
    """Raised when a temporary configuration file cannot be created or written."""


class PathEncodingError(HarnessError):
    """Raised when a path cannot be represented as text."""

    def __init__(self, path: object):
        self.path = path
        super().__init__(f"Path cannot be represented as text: {path!r}")


class ScriptFailedError(HarnessError):
    """Raised when a PHP script run with the extension loaded does not succeed."""

    def __init__(self, message: str, command: Sequence[str], stdout: str, stderr: str):
        self.command = list(command)
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"{message}: {' '.join(self.command)}\n"
            f"===== stdout =====\n{stdout}\n"
            f"===== stderr =====\n{stderr}"
        )


# 🔼⚙️🔚
