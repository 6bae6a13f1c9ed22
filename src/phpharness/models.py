#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Value types shared across the harness."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from attrs import define, field
from provide.foundation.process import run

if TYPE_CHECKING:
    from provide.foundation.process import CompletedProcess

    from phpharness.ini import TmpConfigFile


@define(frozen=True)
class Context:
    """The discovered PHP binary and the concatenated contents of its ini files."""

    php_bin: str
    ini_content: str = field(repr=False)

    def create_tmp_php_ini_file(self, lib_path: str | os.PathLike[str]) -> TmpConfigFile:
        """See :func:`phpharness.ini.create_tmp_php_ini_file`."""
        from phpharness.ini import create_tmp_php_ini_file

        return create_tmp_php_ini_file(lib_path, context=self)

    def create_command_with_tmp_php_ini_args(
        self, tmp_php_ini_file: TmpConfigFile, script: str | os.PathLike[str]
    ) -> ContextCommand:
        """See :func:`phpharness.invocation.create_command_with_tmp_php_ini_args`."""
        from phpharness.invocation import create_command_with_tmp_php_ini_args

        return create_command_with_tmp_php_ini_args(tmp_php_ini_file, script, context=self)

    def find_php_fpm(self, manager_name: str | None = None) -> str | None:
        """See :func:`phpharness.fpm.find_php_fpm`."""
        from phpharness.fpm import find_php_fpm

        return find_php_fpm(self.php_bin, manager_name)

    def create_tmp_fpm_conf_file(self) -> TmpConfigFile:
        """See :func:`phpharness.fpm.create_tmp_fpm_conf_file`."""
        from phpharness.fpm import create_tmp_fpm_conf_file

        return create_tmp_fpm_conf_file()


@define(frozen=True)
class ContextCommand:
    """A ready-to-run PHP invocation that only sees its own ini file."""

    program: str
    args: tuple[str, ...] = field(converter=tuple)

    def get_args(self) -> tuple[str, ...]:
        return self.args

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def run(self, **kwargs: Any) -> CompletedProcess:
        """Spawn the invocation and wait for it.

        The exit status is not checked; inspecting the result is up to the
        caller. Keyword arguments (``timeout``, ``cwd``, ``env``) are passed
        through to :func:`provide.foundation.process.run`; without ``env`` the
        child inherits the full current environment.
        """
        kwargs.setdefault("check", False)
        kwargs.setdefault("env", dict(os.environ))
        return run(self.argv, **kwargs)


# 🔼⚙️🔚
