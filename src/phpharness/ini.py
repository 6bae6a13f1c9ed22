#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Ephemeral ini files for running PHP with an extension under test."""

from __future__ import annotations

import os
from pathlib import Path
import tempfile
from types import TracebackType
import weakref

from provide.foundation.logger import get_logger

from phpharness.errors import TempFileError
from phpharness.models import Context
from phpharness.utils import absolute_path_str

log = get_logger(__name__)

TMP_PREFIX = "phpharness-"


def _remove(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        log.warning("Failed to remove temporary file", path=str(path), error=str(e))
    else:
        log.debug("Removed temporary file", path=str(path))


class TmpConfigFile:
    """A temporary file on disk, deleted when this handle is closed or collected.

    Use it as a context manager so removal happens on every exit path::

        with create_tmp_php_ini_file(lib) as ini:
            ...
    """

    def __init__(self, contents: str | bytes, suffix: str = ".ini") -> None:
        data = contents.encode("utf-8") if isinstance(contents, str) else contents
        try:
            fd, name = tempfile.mkstemp(prefix=TMP_PREFIX, suffix=suffix)
        except OSError as e:
            log.error("Failed to create temporary file", error=str(e))
            raise TempFileError(f"Failed to create temporary file: {e}") from e

        self.path = Path(name)
        self._finalizer = weakref.finalize(self, _remove, self.path)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            self._finalizer()
            log.error("Failed to write temporary file", path=name, error=str(e))
            raise TempFileError(f"Failed to write temporary file '{name}': {e}") from e

        self._contents = data
        log.debug("Created temporary file", path=name, size=len(data))

    @property
    def contents(self) -> str:
        return self._contents.decode("utf-8")

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """Delete the file. Calling it again is a no-op."""
        self._finalizer()

    def __fspath__(self) -> str:
        return str(self.path)

    def __enter__(self) -> TmpConfigFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<TmpConfigFile {str(self.path)!r} {state}>"


def extension_directive(lib_path: str | os.PathLike[str]) -> str:
    """The ``extension=`` line loading ``lib_path`` by absolute path."""
    return f"extension={absolute_path_str(lib_path)}\n"


def create_tmp_php_ini_file(
    lib_path: str | os.PathLike[str], context: Context | None = None
) -> TmpConfigFile:
    """Write the discovered ini settings plus an ``extension=`` line to a temp file.

    Args:
        lib_path: Path to the compiled extension (``.so``/``.dll``).
        context: Context to take the base settings from; defaults to the
            global context.

    Raises:
        PathEncodingError: If ``lib_path`` cannot be represented as text.
        TempFileError: If the file cannot be created or written.
    """
    if context is None:
        from phpharness.context import get_global

        context = get_global()

    directive = extension_directive(lib_path)
    return TmpConfigFile(context.ini_content + directive)


# 🔼⚙️🔚
