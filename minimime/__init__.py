"""Map file names, extensions and content types to MIME records."""

from .db.index import MimeDb, get_db
from .filename import extension_of
from .info import Info
from .lookup import lookup_by_content_type, lookup_by_extension, lookup_by_filename

__all__ = [
    "Info",
    "MimeDb",
    "extension_of",
    "get_db",
    "lookup_by_content_type",
    "lookup_by_extension",
    "lookup_by_filename",
]
