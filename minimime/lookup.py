"""Lookups against the process-wide MIME index.

All functions are pure and safe to call from any thread.  Unknown or
unparseable input gives ``None``; nothing here raises for a ``str``
argument.
"""

from __future__ import annotations

from .db.index import get_db
from .info import Info


def lookup_by_filename(filename: str) -> Info | None:
    """Look up by the last suffix of *filename* (a bare name or a path)."""
    return get_db().lookup_by_filename(filename)


def lookup_by_extension(extension: str) -> Info | None:
    """Look up by extension, with or without leading dot, in any case."""
    return get_db().lookup_by_extension(extension)


def lookup_by_content_type(content_type: str) -> Info | None:
    """Look up a bare ``type/subtype``; parameters such as ``; charset=`` never match."""
    return get_db().lookup_by_content_type(content_type)
