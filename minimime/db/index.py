"""Extension and content-type indices over the MIME dataset."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..filename import extension_of
from ..info import Info
from ..util.singletons import register_singleton
from .dataset import ENTRIES, Entry

logger = logging.getLogger(__name__)


class MimeDb:
    """Two read-only mappings, extension -> Info and content type -> Info.

    *entries* are applied in iteration order and the last entry for a key
    wins.  Pass the rows in canonical order (see
    :mod:`minimime.db.dataset`) to get the documented tie-break.
    """

    def __init__(self, entries: Iterable[Entry] = ENTRIES) -> None:
        by_ext: dict[str, Info] = {}
        by_type: dict[str, Info] = {}
        for entry in entries:
            info = Info.from_entry(entry)
            previous = by_ext.get(info.extension)
            if previous is not None and previous.content_type != info.content_type:
                logger.debug(
                    "Extension %r: %s overrides %s",
                    info.extension, info.content_type, previous.content_type,
                )
            by_ext[info.extension] = info
            by_type[info.content_type] = info
        self._by_ext: Mapping[str, Info] = MappingProxyType(by_ext)
        self._by_type: Mapping[str, Info] = MappingProxyType(by_type)
        logger.debug(
            "Loaded MIME index: %d extension(s), %d content type(s)",
            len(by_ext), len(by_type),
        )

    @property
    def extensions(self) -> Mapping[str, Info]:
        return self._by_ext

    @property
    def content_types(self) -> Mapping[str, Info]:
        return self._by_type

    def lookup_by_extension(self, extension: str) -> Info | None:
        key = extension.lstrip(".").lower()
        if not key:
            return None
        return self._by_ext.get(key)

    def lookup_by_filename(self, filename: str) -> Info | None:
        ext = extension_of(filename)
        if ext is None:
            return None
        return self.lookup_by_extension(ext)

    def lookup_by_content_type(self, content_type: str) -> Info | None:
        return self._by_type.get(content_type.lower())


_db: MimeDb | None = None
_db_lock = threading.Lock()


def get_db() -> MimeDb:
    """Return the process-wide index, building it on first use."""
    global _db
    db = _db
    if db is None:
        with _db_lock:
            if _db is None:
                _db = MimeDb()
            db = _db
    return db


def _reset_db() -> None:
    global _db
    with _db_lock:
        _db = None


register_singleton(_reset_db)
