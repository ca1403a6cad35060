"""Compiled-in dataset and the indices built from it."""

from .dataset import ENCODINGS, ENTRIES, Entry
from .index import MimeDb, get_db

__all__ = [
    "ENCODINGS",
    "ENTRIES",
    "Entry",
    "MimeDb",
    "get_db",
]
