"""Per-call state of an export.

Each destination file moves through ``unseen -> loaded -> updated* ->
written | failed``. A file that failed to load stays failed for the rest of
the call and every later update aimed at it is dropped without another
report, so a file touched by many strings produces a single error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Set

from ...core.errors import base_message
from ...core.locale import extract_locale
from ...core.models import OperationResult, ResultStatus, StringResource
from ...infra.properties import dump_resources, load_resources

log = logging.getLogger(__name__)


class ExportSession:
    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        self.files: Dict[Path, List[StringResource]] = {}
        self.failed: Set[Path] = set()

    def _result(self, path: Path, error: Optional[BaseException] = None) -> OperationResult:
        if error is None:
            return OperationResult(path=path, project_name=self.project_name)
        return OperationResult(
            path=path,
            project_name=self.project_name,
            status=ResultStatus.ERROR,
            message=base_message(error),
        )

    def load(self, path: Path) -> Optional[OperationResult]:
        """Bring ``path`` into the cache; returns an error result on failure."""
        if path in self.files or path in self.failed:
            return None
        try:
            # stat() itself can fail, e.g. name too long or unsearchable parent
            if path.exists():
                entries = load_resources(path, extract_locale(path.name))
            else:
                log.debug("New resource file %s", path)
                entries = []
        except OSError as e:
            log.warning("Cannot load %s, skipping further updates to it: %s", path, e)
            self.failed.add(path)
            return self._result(path, e)
        self.files[path] = entries
        return None

    def update(self, path: Path, source: StringResource, locale: str) -> None:
        if path in self.failed:
            return
        entries = self.files[path]
        # Import keeps the last of duplicated keys, so update that one.
        target = next((r for r in reversed(entries) if r.name == source.name), None)
        if target is None:
            target = StringResource(name=source.name)
            entries.append(target)
        target.set_locale_text(locale, source.get_locale_text(locale))
        target.notes = source.notes

    def write_all(self) -> Iterator[OperationResult]:
        for path, entries in self.files.items():
            # The file name decides which locale's text goes into the file.
            locale = extract_locale(path.name)
            try:
                dump_resources(path, entries, locale)
            except (OSError, UnicodeError) as e:
                log.error("Failed to write %s: %s", path, e)
                yield self._result(path, e)
                continue
            yield self._result(path)

