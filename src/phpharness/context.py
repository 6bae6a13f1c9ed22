#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Process-wide PHP context, discovered once on first use.

Discovery spawns several processes and reads every active ini file, so it is
done lazily and only once. ``get_global()`` is safe to call from many threads
at the same time: the first caller runs discovery while the others wait, and
all of them receive the same :class:`Context` object.

Usage:
    ctx = get_global()
    with ctx.create_tmp_php_ini_file("target/libmyext.so") as ini:
        result = ctx.create_command_with_tmp_php_ini_args(ini, "tests/php/test.php").run()
"""

from __future__ import annotations

from collections.abc import Callable
import threading
from typing import Generic, TypeVar

from provide.foundation.logger import get_logger

from phpharness.discovery import discover
from phpharness.models import Context, ContextCommand

log = get_logger(__name__)

T = TypeVar("T")

_UNSET = object()


class OnceCell(Generic[T]):
    """A value computed by ``factory`` exactly once, on first access.

    If the factory raises, the cell stays empty and the exception propagates
    to the caller that triggered it; a later call runs the factory again.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is _UNSET:
            with self._lock:
                value = self._value
                if value is _UNSET:
                    value = self._factory()
                    self._value = value
        return value  # type: ignore[return-value]

    def reset(self) -> None:
        with self._lock:
            self._value = _UNSET


_GLOBAL: OnceCell[Context] = OnceCell(lambda: discover())


def get_global() -> Context:
    """Return the process-wide context, running discovery on the first call."""
    if not _GLOBAL.initialized:
        log.debug("Initializing global PHP context")
    return _GLOBAL.get()


def reset_global_for_testing() -> None:
    """Forget the cached context so the next ``get_global()`` rediscovers."""
    _GLOBAL.reset()


__all__ = [
    "Context",
    "ContextCommand",
    "OnceCell",
    "get_global",
    "reset_global_for_testing",
]

# 🔼⚙️🔚
