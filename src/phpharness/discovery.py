#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Discovery of the PHP binary and the ini files it loads.

The binary is located through ``php-config --php-binary`` (the tool name can
be overridden with ``PHP_CONFIG``). The binary is then asked which ini files it
loaded, and their contents are concatenated in load order: the primary
``php.ini`` first, then every scanned file from the ``conf.d`` directory.

An empty path string means PHP has no such file and is skipped. A path that
PHP reports but that cannot be read is a hard error."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from provide.foundation.logger import get_logger

from phpharness.config import HarnessSettings
from phpharness.errors import ConfigReadError
from phpharness.models import Context
from phpharness.runner import execute_command

log = get_logger(__name__)

LOADED_INI_SCRIPT = "echo php_ini_loaded_file();"
SCANNED_INI_SCRIPT = "echo php_ini_scanned_files();"


def probe_tool_name(settings: HarnessSettings | None = None) -> str:
    """Name of the ``php-config`` tool to query."""
    return (settings or HarnessSettings.from_env()).php_config


def find_php_binary(php_config: str) -> str:
    """Ask ``php-config`` for the absolute path of the PHP binary."""
    return execute_command([php_config, "--php-binary"])


def _eval_php(php_bin: str, script: str) -> str:
    return execute_command([php_bin, "-d", "display_errors=stderr", "-r", script])


def loaded_ini_file(php_bin: str) -> str:
    """Path of the primary ini file, or an empty string when none is loaded."""
    return _eval_php(php_bin, LOADED_INI_SCRIPT)


def scanned_ini_files(php_bin: str) -> list[str]:
    """Paths of the additional scanned ini files, in load order."""
    output = _eval_php(php_bin, SCANNED_INI_SCRIPT)
    if not output:
        return []
    return [entry.strip() for entry in output.split(",") if entry.strip()]


def _read_ini(path: str) -> str:
    try:
        return Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.error("Failed to read ini file", path=path, error=str(e))
        raise ConfigReadError(path, str(e)) from e


def read_ini_files(primary: str, scanned: Iterable[str]) -> str:
    """Concatenate the primary ini file and scanned ini files, without separators."""
    parts: list[str] = []
    if primary:
        parts.append(_read_ini(primary))
    for path in scanned:
        parts.append(_read_ini(path))
    return "".join(parts)


def discover(settings: HarnessSettings | None = None) -> Context:
    """Locate the PHP binary and assemble its active configuration.

    Raises:
        DiscoveryError: If ``php-config`` or the PHP binary cannot be run.
        ConfigReadError: If a reported ini file cannot be read.
    """
    php_config = probe_tool_name(settings)
    php_bin = find_php_binary(php_config)
    primary = loaded_ini_file(php_bin)
    scanned = scanned_ini_files(php_bin)
    ini_content = read_ini_files(primary, scanned)

    log.info(
        "Discovered PHP binary",
        php_config=php_config,
        php_bin=php_bin,
        loaded_ini=primary or None,
        scanned_ini_count=len(scanned),
    )
    return Context(php_bin=php_bin, ini_content=ini_content)


# 🔼⚙️🔚
