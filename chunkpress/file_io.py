"""Reading and writing whole binary files."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the full contents of the file at ``path``.

    Raises ``OSError`` (such as ``FileNotFoundError``) if it cannot be read.
    """
    return Path(path).read_bytes()


def write_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``path``, replacing any existing contents.

    Raises ``OSError`` if the file cannot be opened for writing.
    """
    with open(path, "wb") as handle:
        handle.write(bytes(data))