#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Path helpers shared by the ini and invocation builders."""

from __future__ import annotations

import os

from phpharness.errors import PathEncodingError


def path_to_str(path: str | os.PathLike[str] | bytes) -> str:
    """Render ``path`` as UTF-8 representable text.

    Raises:
        PathEncodingError: For undecodable bytes or strings carrying lone
            surrogates (from ``surrogateescape`` decoding).
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PathEncodingError(path) from e
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathEncodingError(path) from e
    return raw


def absolute_path_str(path: str | os.PathLike[str] | bytes) -> str:
    """Like :func:`path_to_str`, joined onto the current directory when relative.

    The text is never normalised, so absolute paths are returned as given.
    """
    text = path_to_str(path)
    if os.path.isabs(text):
        return text
    return os.path.join(os.getcwd(), text)


# 🔼⚙️🔚
