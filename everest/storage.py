"""Fixed-size record storage on plain files."""

from __future__ import annotations

import os
from typing import Union

RECORD_SIZE = 2048

PathLike = Union[str, "os.PathLike[str]"]


def fswrite(filename: PathLike, data: Union[str, bytes]) -> int:
    """Append one record, NUL-padded or truncated to RECORD_SIZE bytes.

    Returns the number of bytes written; raises OSError if the file
    cannot be opened.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    record = raw[:RECORD_SIZE].ljust(RECORD_SIZE, b"\0")
    with open(filename, "ab") as handle:
        return handle.write(record)


def fsopen(filename: PathLike) -> bytes:
    """Read the first record of a file (at most RECORD_SIZE bytes).

    Raises OSError (such as FileNotFoundError) if the file cannot be opened.
    """
    with open(filename, "rb") as handle:
        return handle.read(RECORD_SIZE)