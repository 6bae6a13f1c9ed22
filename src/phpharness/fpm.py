#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Locating php-fpm next to the discovered PHP binary.

Distribution layouts put ``php-fpm`` in ``<prefix>/sbin`` while ``php`` lives
in ``<prefix>/bin``, and versioned installs share the suffix, e.g.
``/usr/bin/php8.1`` pairs with ``/usr/sbin/php-fpm8.1``. Running FPM is left
to the caller."""

from __future__ import annotations

from importlib import resources
from pathlib import PurePath

from provide.foundation.logger import get_logger

from phpharness.config import HarnessSettings
from phpharness.ini import TmpConfigFile

log = get_logger(__name__)

PHP_PREFIX = "php"
FPM_CONF_RESOURCE = "php-fpm.conf"


def _parent(path: PurePath) -> PurePath | None:
    parent = path.parent
    return None if parent == path else parent


def find_php_fpm(php_bin: str | None = None, manager_name: str | None = None) -> str | None:
    """Guess the php-fpm path belonging to ``php_bin``.

    Returns ``None`` when ``php_bin`` has no grandparent directory or its file
    name is not valid text.
    """
    if php_bin is None:
        from phpharness.context import get_global

        php_bin = get_global().php_bin
    if manager_name is None:
        manager_name = HarnessSettings.from_env().fpm_name

    path = PurePath(php_bin)
    parent = _parent(path)
    prefix = _parent(parent) if parent is not None else None
    if prefix is None:
        log.debug("php binary has no grandparent directory", php_bin=php_bin)
        return None

    name = path.name
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        log.debug("php binary name is not valid text", php_bin=php_bin)
        return None

    suffix = name[len(PHP_PREFIX) :] if name.startswith(PHP_PREFIX) else ""
    return str(prefix / "sbin" / f"{manager_name}{suffix}")


def fpm_conf_template() -> bytes:
    """The bundled php-fpm configuration."""
    return (resources.files("phpharness") / "etc" / FPM_CONF_RESOURCE).read_bytes()


def create_tmp_fpm_conf_file() -> TmpConfigFile:
    """Write the bundled php-fpm configuration to an auto-deleting temp file."""
    return TmpConfigFile(fpm_conf_template(), suffix=".conf")


# 🔼⚙️🔚
