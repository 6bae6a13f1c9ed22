#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from phpharness.context import reset_global_for_testing
from phpharness.models import Context
from tests.helpers.php_testing import FAKE_PHP_BIN

BASE_INI = "memory_limit = 128M\r\n; comment\ndate.timezone = UTC\n"


@pytest.fixture
def fake_context() -> Context:
    """A context that never touches a real PHP installation."""
    return Context(php_bin=FAKE_PHP_BIN, ini_content=BASE_INI)


@pytest.fixture
def fake_extension(tmp_path: Path) -> Path:
    """Path of a (fake) compiled extension."""
    lib = tmp_path / "target" / "libhello.so"
    lib.parent.mkdir()
    lib.write_bytes(b"\x7fELF")
    return lib


@pytest.fixture
def ini_tree(tmp_path: Path) -> dict[str, Path]:
    """A php.ini plus two scanned conf.d files."""
    conf_d = tmp_path / "ini.d"
    conf_d.mkdir()
    files = {
        "primary": tmp_path / "php.ini",
        "x": conf_d / "x.ini",
        "y": conf_d / "y.ini",
    }
    files["primary"].write_bytes(b"[PHP]\nmemory_limit = 256M\n")
    files["x"].write_bytes(b"extension=opcache\r\n")
    files["y"].write_bytes(b"; no trailing newline")
    return files


@pytest.fixture(autouse=True)
def reset_global_context() -> Generator[None, None, None]:
    """Keep the process-wide context from leaking between tests."""
    reset_global_for_testing()
    yield
    reset_global_for_testing()


# 🔼⚙️🔚
