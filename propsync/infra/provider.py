"""Resource provider for trees of Java ``.properties`` files.

Every file holds one language. Invariant strings live in a file without a
locale in its name (``strings.properties``); ``strings_de.properties`` and
``strings_de-DE.properties`` are its translations. Subfolders of the base
directory are processed too and become part of the resource name, so all
translations of a file must sit in the same folder as the invariant file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.errors import StorageLocationError
from ..core.models import OperationResult, StorageType, StringResource
from ..features.exporter import export_resources
from ..features.exporter.merger import ResultCallback
from ..features.importer import import_resources

log = logging.getLogger(__name__)


class PropertiesResourcesProvider:
    NAME = "Java Properties File Resources Provider"
    DESCRIPTION = "Standard Java Properties File Resources Provider. Every file contains one language."
    STORAGE_LOCATION_USER_TEXT = "Base Directory where language files are located"
    STORAGE_TYPE = StorageType.DIRECTORY

    def __init__(self, storage_location: str, solution_path: Optional[str] = None) -> None:
        self.storage_location = storage_location
        self.solution_path = solution_path

    @classmethod
    def from_settings(cls, settings) -> "PropertiesResourcesProvider":
        return cls(settings.STORAGE_LOCATION, settings.SOLUTION_PATH or None)

    @property
    def storage_location(self) -> str:
        return self._storage_location

    @storage_location.setter
    def storage_location(self, value: str) -> None:
        if value is None or not value.strip():
            raise StorageLocationError("Storage location must not be blank")
        self._storage_location = value

    def base_directory(self) -> Path:
        """Storage location as an absolute path; relative ones hang off the solution path."""
        location = Path(self._storage_location)
        if location.is_absolute():
            return location
        base = Path(self.solution_path) if self.solution_path else Path.cwd()
        return (base / location).resolve()

    def import_resource_strings(self, project_name: str) -> List[StringResource]:
        log.info("Importing project %s from %s", project_name, self.base_directory())
        return import_resources(self.base_directory())

    def export_resource_strings(
        self,
        project_name: str,
        resources: Iterable[StringResource],
        on_result: Optional[ResultCallback] = None,
    ) -> List[OperationResult]:
        log.info("Exporting project %s to %s", project_name, self.base_directory())
        return export_resources(project_name, self.base_directory(), resources, on_result)
