#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pytest fixtures for testing PHP extensions against an isolated interpreter."""

from __future__ import annotations

from collections.abc import Callable, Generator
import os

import pytest

from phpharness.context import get_global
from phpharness.ini import TmpConfigFile, create_tmp_php_ini_file
from phpharness.invocation import create_command_with_tmp_php_ini_args
from phpharness.models import Context, ContextCommand


@pytest.fixture(scope="session")
def php_context() -> Context:
    """The process-wide PHP context."""
    return get_global()


@pytest.fixture
def php_ini_factory(
    php_context: Context,
) -> Generator[Callable[[str | os.PathLike[str]], TmpConfigFile], None, None]:
    """Factory for ephemeral ini files loading a given extension, removed at teardown."""
    created: list[TmpConfigFile] = []

    def factory(lib_path: str | os.PathLike[str]) -> TmpConfigFile:
        ini = create_tmp_php_ini_file(lib_path, context=php_context)
        created.append(ini)
        return ini

    yield factory

    for ini in created:
        ini.close()


@pytest.fixture
def php_invocation_factory(
    php_context: Context,
) -> Callable[[TmpConfigFile, str | os.PathLike[str]], ContextCommand]:
    """Factory for isolated ``php -n -c <ini> <script>`` invocations."""

    def factory(ini: TmpConfigFile, script: str | os.PathLike[str]) -> ContextCommand:
        return create_command_with_tmp_php_ini_args(ini, script, context=php_context)

    return factory


# 🔼⚙️🔚
