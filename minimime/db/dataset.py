"""Compiled-in MIME dataset.

Each row is ``<extension> <content_type> <encoding>``.  Rows are validated
when this module is imported, so a malformed row fails the import instead
of surfacing during a lookup.

Canonical ordering: :data:`ENTRIES` holds the rows stably sorted by content
type.  Within one content type the rows keep their order below, with the
canonical extension listed last.  The index is filled in that order and the
last row wins, so a repeated extension resolves to the alphabetically later
content type and a content type resolves to its canonical extension.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from operator import attrgetter

from ..info import BINARY_ENCODINGS

ENCODINGS: frozenset[str] = frozenset({
    "7bit",
    "8bit",
    "base64",
    "binary",
    "quoted-printable",
})

_EXTENSION_RE = re.compile(r"[a-z0-9]+")
_TOKEN = r"[a-z0-9][a-z0-9!#$&^_.+-]*"
_CONTENT_TYPE_RE = re.compile(rf"{_TOKEN}/{_TOKEN}")


@dataclass(frozen=True, slots=True)
class Entry:
    """One dataset row."""

    extension: str
    content_type: str
    encoding: str

    def __post_init__(self) -> None:
        if not _EXTENSION_RE.fullmatch(self.extension):
            raise ValueError(f"invalid extension {self.extension!r} in dataset row {self}")
        if not _CONTENT_TYPE_RE.fullmatch(self.content_type):
            raise ValueError(f"invalid content type {self.content_type!r} in dataset row {self}")
        if self.encoding not in ENCODINGS:
            raise ValueError(f"unknown encoding {self.encoding!r} in dataset row {self}")

    @property
    def is_binary(self) -> bool:
        return self.encoding in BINARY_ENCODINGS


def parse_rows(text: str) -> list[Entry]:
    """Parse dataset text; blank lines and ``#`` comments are skipped."""
    entries: list[Entry] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 3:
            raise ValueError(f"dataset line {lineno}: expected 3 fields, got {len(parts)}: {raw!r}")
        entries.append(Entry(*parts))
    return entries


def canonical_order(entries: list[Entry]) -> tuple[Entry, ...]:
    return tuple(sorted(entries, key=attrgetter("content_type")))


_DATASET = """
# -- application -----------------------------------------------------------
ez          application/andrew-inset                                                    base64
atom        application/atom+xml                                                        8bit
epub        application/epub+zip                                                        base64
gz          application/gzip                                                            base64
jar         application/java-archive                                                    base64
class       application/java-vm                                                         base64
mjs         application/javascript                                                      8bit
js          application/javascript                                                      8bit
json        application/json                                                            8bit
jsonld      application/ld+json                                                         8bit
webmanifest application/manifest+json                                                   8bit
dot         application/msword                                                          base64
doc         application/msword                                                         base64
mp4s        application/mp4                                                             base64
mp4         application/mp4                                                             base64
dump        application/octet-stream                                                    base64
deploy      application/octet-stream                                                    base64
dist        application/octet-stream                                                    base64
dll         application/octet-stream                                                    base64
exe         application/octet-stream                                                    base64
lrf         application/octet-stream                                                    base64
pkg         application/octet-stream                                                    base64
so          application/octet-stream                                                    base64
bin         application/octet-stream                                                    base64
ogx         application/ogg                                                             base64
ogg         application/ogg                                                             base64
pdf         application/pdf                                                             base64
sig         application/pgp-signature                                                   base64
ai          application/postscript                                                      8bit
eps         application/postscript                                                      8bit
ps          application/postscript                                                      8bit
rss         application/rss+xml                                                         8bit
rtf         application/rtf                                                             8bit
sql         application/sql                                                             8bit
azw         application/vnd.amazon.ebook                                                base64
apk         application/vnd.android.package-archive                                     base64
mpkg        application/vnd.apple.installer+xml                                         8bit
gtm         application/vnd.groove-tool-message                                         base64
zmm         application/vnd.handheld-entertainment+xml                                  8bit
123         application/vnd.lotus-1-2-3                                                 base64
xla         application/vnd.ms-excel                                                    base64
xlc         application/vnd.ms-excel                                                    base64
xlm         application/vnd.ms-excel                                                    base64
xlt         application/vnd.ms-excel                                                    base64
xlw         application/vnd.ms-excel                                                    base64
xls         application/vnd.ms-excel                                                    base64
eot         application/vnd.ms-fontobject                                               base64
pot         application/vnd.ms-powerpoint                                               base64
pps         application/vnd.ms-powerpoint                                               base64
ppt         application/vnd.ms-powerpoint                                               base64
odp         application/vnd.oasis.opendocument.presentation                             base64
ods         application/vnd.oasis.opendocument.spreadsheet                              base64
odt         application/vnd.oasis.opendocument.text                                     base64
pptx        application/vnd.openxmlformats-officedocument.presentationml.presentation   base64
xlsx        application/vnd.openxmlformats-officedocument.spreadsheetml.sheet           base64
docx        application/vnd.openxmlformats-officedocument.wordprocessingml.document     base64
rar         application/vnd.rar                                                        base64
db          application/vnd.sqlite3                                                     base64
sqlite3     application/vnd.sqlite3                                                     base64
sqlite      application/vnd.sqlite3                                                     base64
vsd         application/vnd.visio                                                       base64
wasm        application/wasm                                                            base64
7z          application/x-7z-compressed                                                 base64
torrent     application/x-bittorrent                                                    base64
bz          application/x-bzip                                                          base64
boz         application/x-bzip2                                                         base64
bz2         application/x-bzip2                                                         base64
z           application/x-compressed                                                    base64
udeb        application/x-debian-package                                                base64
deb         application/x-debian-package                                                base64
dvi         application/x-dvi                                                           base64
tgz         application/x-gtar                                                          base64
gtar        application/x-gtar                                                          base64
php         application/x-httpd-php                                                     8bit
iso         application/x-iso9660-image                                                 base64
latex       application/x-latex                                                         8bit
msi         application/x-ms-installer                                                  base64
wmz         application/x-ms-wmz                                                        base64
mda         application/x-msaccess                                                      base64
mdb         application/x-msaccess                                                      base64
com         application/x-msdownload                                                    base64
dll         application/x-msdownload                                                    base64
exe         application/x-msdownload                                                    base64
wmz         application/x-msmetafile                                                    base64
wmf         application/x-msmetafile                                                    base64
sh          application/x-sh                                                            8bit
swf         application/x-shockwave-flash                                               base64
tar         application/x-tar                                                           base64
tex         application/x-tex                                                           8bit
der         application/x-x509-ca-cert                                                  base64
crt         application/x-x509-ca-cert                                                  base64
xht         application/xhtml+xml                                                       8bit
xhtml       application/xhtml+xml                                                       8bit
xsl         application/xml                                                             8bit
xml         application/xml                                                             8bit
xsl         application/xslt+xml                                                        8bit
xslt        application/xslt+xml                                                        8bit
yml         application/yaml                                                            8bit
yaml        application/yaml                                                            8bit
zip         application/zip                                                             base64

# -- audio -----------------------------------------------------------------
aac         audio/aac                                                                   base64
flac        audio/flac                                                                  base64
kar         audio/midi                                                                  base64
mid         audio/midi                                                                  base64
midi        audio/midi                                                                  base64
m4a         audio/mp4                                                                   base64
m2a         audio/mpeg                                                                  base64
mp2         audio/mpeg                                                                  base64
mpga        audio/mpeg                                                                  base64
mp3         audio/mpeg                                                                  base64
oga         audio/ogg                                                                   base64
opus        audio/ogg                                                                   base64
spx         audio/ogg                                                                   base64
ogg         audio/ogg                                                                   base64
wav         audio/wav                                                                   base64
weba        audio/webm                                                                  base64
aif         audio/x-aiff                                                                base64
aifc        audio/x-aiff                                                                base64
aiff        audio/x-aiff                                                                base64
wma         audio/x-ms-wma                                                              base64

# -- font ------------------------------------------------------------------
otf         font/otf                                                                    base64
ttf         font/ttf                                                                    base64
woff        font/woff                                                                   base64
woff2       font/woff2                                                                  base64

# -- image -----------------------------------------------------------------
avif        image/avif                                                                  base64
bmp         image/bmp                                                                   base64
gif         image/gif                                                                   base64
heic        image/heic                                                                  base64
jpe         image/jpeg                                                                  base64
jpeg        image/jpeg                                                                  base64
jpg         image/jpeg                                                                  base64
png         image/png                                                                   base64
svg         image/svg+xml                                                               8bit
tif         image/tiff                                                                  base64
tiff        image/tiff                                                                  base64
psd         image/vnd.adobe.photoshop                                                   base64
webp        image/webp                                                                  base64
ico         image/x-icon                                                                base64

# -- message / model ---------------------------------------------------------
mime        message/rfc822                                                              8bit
eml         message/rfc822                                                              8bit
gltf        model/gltf+json                                                             8bit
glb         model/gltf-binary                                                           base64

# -- text ------------------------------------------------------------------
appcache    text/cache-manifest                                                         quoted-printable
ifb         text/calendar                                                               quoted-printable
ics         text/calendar                                                               quoted-printable
css         text/css                                                                    quoted-printable
csv         text/csv                                                                    quoted-printable
htm         text/html                                                                   quoted-printable
html        text/html                                                                   quoted-printable
markdown    text/markdown                                                               quoted-printable
md          text/markdown                                                               quoted-printable
conf        text/plain                                                                  quoted-printable
def         text/plain                                                                  quoted-printable
in          text/plain                                                                  quoted-printable
ini         text/plain                                                                  quoted-printable
list        text/plain                                                                  quoted-printable
log         text/plain                                                                  quoted-printable
text        text/plain                                                                  quoted-printable
txt         text/plain                                                                  quoted-printable
rtx         text/richtext                                                               quoted-printable
rtf         text/rtf                                                                    quoted-printable
tsv         text/tab-separated-values                                                   quoted-printable
man         text/troff                                                                  quoted-printable
me          text/troff                                                                  quoted-printable
ms          text/troff                                                                  quoted-printable
roff        text/troff                                                                  quoted-printable
tr          text/troff                                                                  quoted-printable
urls        text/uri-list                                                               quoted-printable
uris        text/uri-list                                                               quoted-printable
uri         text/uri-list                                                               quoted-printable
vcard       text/vcard                                                                  quoted-printable
vcf         text/vcard                                                                  quoted-printable
vtt         text/vtt                                                                    quoted-printable
cc          text/x-c                                                                    quoted-printable
cpp         text/x-c                                                                    quoted-printable
cxx         text/x-c                                                                    quoted-printable
dic         text/x-c                                                                    quoted-printable
h           text/x-c                                                                    quoted-printable
hh          text/x-c                                                                    quoted-printable
c           text/x-c                                                                    quoted-printable
java        text/x-java-source                                                          quoted-printable
py          text/x-python                                                               quoted-printable
xml         text/xml                                                                    quoted-printable

# -- video -----------------------------------------------------------------
3gp         video/3gpp                                                                  base64
mp4v        video/mp4                                                                   base64
mpg4        video/mp4                                                                   base64
mp4         video/mp4                                                                   base64
m1v         video/mpeg                                                                  base64
m2v         video/mpeg                                                                  base64
mpe         video/mpeg                                                                  base64
mpg         video/mpeg                                                                  base64
mpeg        video/mpeg                                                                  base64
ogv         video/ogg                                                                   base64
qt          video/quicktime                                                             base64
mov         video/quicktime                                                             base64
webm        video/webm                                                                  base64
flv         video/x-flv                                                                 base64
wmv         video/x-ms-wmv                                                              base64
mk3d        video/x-matroska                                                            base64
mks         video/x-matroska                                                            base64
mkv         video/x-matroska                                                            base64
avi         video/x-msvideo                                                             base64
"""

ENTRIES: tuple[Entry, ...] = canonical_order(parse_rows(_DATASET))
