"""Query result record for MIME lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .db.dataset import Entry

BINARY_ENCODINGS: frozenset[str] = frozenset({"base64", "binary"})


@dataclass(frozen=True, slots=True)
class Info:
    """Read-only description of one file type.

    Instances are built once when the index is loaded and shared by every
    lookup that resolves to them.

    Examples::

        info = Info.from_line("pdf application/pdf base64")
        info.content_type    # "application/pdf"
        info.is_binary()     # True
    """

    extension: str
    content_type: str
    encoding: str

    # -- constructors ------------------------------------------------------

    @classmethod
    def from_entry(cls, entry: Entry) -> Info:
        return cls(
            extension=entry.extension,
            content_type=entry.content_type,
            encoding=entry.encoding,
        )

    @classmethod
    def from_line(cls, line: str) -> Info | None:
        """Parse ``"<extension> <content_type> <encoding>"``.

        Fields are whitespace separated and anything past the third is
        ignored.  Returns ``None`` when fewer than three fields are present.
        """
        parts = line.split()
        if len(parts) < 3:
            return None
        return cls(extension=parts[0], content_type=parts[1], encoding=parts[2])

    # -- predicates --------------------------------------------------------

    def is_binary(self) -> bool:
        return self.encoding in BINARY_ENCODINGS
