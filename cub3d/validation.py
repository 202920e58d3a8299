"""Checks on the scene file name given on the command line."""

from __future__ import annotations

import os

from cub3d.search import strncmp, strrchr


def is_valid_extension(file_name: str | None, extension: str | None) -> bool:
    """True if the text from the last dot of ``file_name`` starts with ``extension``.

    The name must be longer than the extension itself.
    """
    if not file_name or not extension:
        return False
    if len(file_name) <= len(extension):
        return False
    dot = strrchr(file_name, ".")
    if dot is None:
        return False
    return strncmp(file_name[dot:], extension, len(extension)) == 0


def is_valid_file(file_name: str | os.PathLike[str] | None) -> bool:
    """True if ``file_name`` can be opened for reading."""
    if file_name is None:
        return False
    try:
        fd = os.open(file_name, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True