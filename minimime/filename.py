"""File name to extension rule."""

from __future__ import annotations

from pathlib import PurePosixPath


def extension_of(filename: str) -> str | None:
    """Return the text after the last ``.`` of the final path component.

    Only the last suffix counts: ``archive.tar.gz`` gives ``"gz"``.  Names
    without a dot, with a trailing dot, or made of a leading dot and no
    other (``.gitignore``) have no extension and give ``None``.
    """
    name = PurePosixPath(filename).name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or not ext:
        return None
    return ext
