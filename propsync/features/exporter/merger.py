from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ...core.identity import destination_path
from ...core.locale import is_locale_tag
from ...core.models import OperationResult, StringResource
from ...infra.properties import EXTENSION
from .session import ExportSession

log = logging.getLogger(__name__)

ResultCallback = Callable[[OperationResult], None]


def export_resources(
    project_name: str,
    root: Path,
    resources: Iterable[StringResource],
    on_result: Optional[ResultCallback] = None,
) -> List[OperationResult]:
    """Merge ``resources`` into the resource files under ``root``.

    Entries already on disk that no record mentions are kept. Every touched
    file is written once, after all updates for it have been applied. One
    result is produced per destination file and is also passed to
    ``on_result`` as soon as it is known.
    """
    root = Path(root)
    session = ExportSession(project_name)
    results: List[OperationResult] = []

    def report(result: OperationResult) -> None:
        results.append(result)
        if on_result is not None:
            on_result(result)

    for res in resources:
        for locale in res.locales():
            if not is_locale_tag(locale):
                # The file name will not carry this tag back, so its text is not written.
                log.warning("String %s has malformed locale tag %r", res.name, locale)
            path = destination_path(root, res.storage_location, locale, EXTENSION)
            error = session.load(path)
            if error is not None:
                report(error)
                continue
            session.update(path, res, locale)

    log.debug("Writing %d file(s) for project %s", len(session.files), project_name)
    for result in session.write_all():
        report(result)

    failures = sum(1 for r in results if not r.ok)
    log.info(f"Exported project {project_name}: {len(results) - failures} file(s) written, {failures} failed")
    return results
