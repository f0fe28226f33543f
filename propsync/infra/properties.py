"""Reader and writer for the line-oriented ``key = value`` resource format.

Only ISO-8859-1 is supported and no escape processing is done. Comments,
blank lines and lines without ``=`` are dropped on read and never written
back.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Tuple

from ..core.models import StringResource

log = logging.getLogger(__name__)

ENCODING = "latin-1"
EXTENSION = ".properties"
COMMENT_MARKERS = ("#", "!")

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

Entry = Tuple[str, str]


def decode(data: bytes) -> List[Entry]:
    entries: List[Entry] = []
    for line in _LINE_BREAK_RE.split(data.decode(ENCODING)):
        if line.lstrip().startswith(COMMENT_MARKERS) or "=" not in line:
            continue
        key, value = line.split("=", 1)
        entries.append((key.strip(), value.lstrip()))
    return entries


def encode(entries: Iterable[Entry]) -> bytes:
    return "".join(f"{key} = {value}\n" for key, value in entries).encode(ENCODING)


def read_entries(path: Path) -> List[Entry]:
    entries = decode(path.read_bytes())
    log.debug("Read %d entries from %s", len(entries), path)
    return entries


def write_entries(path: Path, entries: Iterable[Entry]) -> None:
    data = encode(entries)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    log.debug("Wrote %s (%d bytes)", path, len(data))


def load_resources(path: Path, locale: str) -> List[StringResource]:
    """Read a file into one resource per entry, text stored under ``locale``."""
    resources = []
    for key, value in read_entries(path):
        res = StringResource(name=key)
        res.set_locale_text(locale, value)
        resources.append(res)
    return resources


def dump_resources(path: Path, resources: Iterable[StringResource], locale: str) -> None:
    write_entries(path, ((r.name, r.get_locale_text(locale)) for r in resources))
