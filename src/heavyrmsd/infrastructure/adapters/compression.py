"""Transparent decompression of structure files, chosen by filename."""

import gzip
import os
from typing import TextIO

from ...core.exceptions import UnreadableInputError

GZIP_SUFFIX = ".gz"


def is_compressed(path: str) -> bool:
    """True when the filename carries a gzip suffix. Contents are not inspected."""
    return path.lower().endswith(GZIP_SUFFIX)


def structure_extension(path: str) -> str:
    """Lower-case format extension of ``path``, ignoring a gzip suffix."""
    name = os.path.basename(path)
    if is_compressed(name):
        name = name[: -len(GZIP_SUFFIX)]
    return os.path.splitext(name)[1].lstrip(".").lower()


def structure_stem(path: str) -> str:
    """Filename without directory, gzip suffix or format extension."""
    name = os.path.basename(path)
    if is_compressed(name):
        name = name[: -len(GZIP_SUFFIX)]
    return os.path.splitext(name)[0]


def open_structure_stream(path: str) -> TextIO:
    """
    Open a structure file for text reading.

    Args:
        path: File to open; gzip-compressed when its name ends in ``.gz``

    Returns:
        Text stream over the (decompressed) contents

    Raises:
        UnreadableInputError: If the file does not exist or cannot be opened
    """
    if not os.path.isfile(path):
        raise UnreadableInputError("Cannot read file", path)

    try:
        if is_compressed(path):
            return gzip.open(path, "rt")
        return open(path, "r")
    except OSError as e:
        raise UnreadableInputError(f"Cannot open file ({e})", path) from e
