from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from ...core.errors import ResourceReadError, StorageLocationError, base_message
from ...core.identity import resolve_identity
from ...core.locale import extract_locale
from ...core.models import StringResource
from ...infra.properties import EXTENSION, read_entries

log = logging.getLogger(__name__)


def find_resource_files(root: Path) -> List[Path]:
    """All resource files below ``root``, in a stable order."""
    return sorted(p for p in root.rglob(f"*{EXTENSION}") if p.is_file())


def import_resources(root: Path) -> List[StringResource]:
    """Read every resource file under ``root`` into one record per (group, key).

    Translations of a group are matched on the identity of their file, so a
    key present only in a translated file still yields a record; it simply
    has no invariant text. Filtering those out is left to the caller.
    """
    root = Path(root)
    if not root.is_dir():
        raise StorageLocationError(f"Base directory not found: {root}")

    working: Dict[Tuple[str, str], StringResource] = {}
    files = find_resource_files(root)

    for path in files:
        locale = extract_locale(path.name)
        identity = resolve_identity(root, path, locale)
        try:
            entries = read_entries(path)
        except OSError as e:
            log.error("Failed to read %s: %s", path, e)
            raise ResourceReadError(path, base_message(e)) from e

        log.debug("Merging %d entries from %s (locale=%r, identity=%s)", len(entries), path, locale, identity)
        for key, value in entries:
            target = working.get((identity, key))
            if target is None:
                target = StringResource(name=key, storage_location=identity)
                working[(identity, key)] = target
            target.set_locale_text(locale, value)

    log.info(f"Imported {len(working)} string(s) from {len(files)} file(s) under {root}")
    return list(working.values())
