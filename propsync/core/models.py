from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

# The invariant (default) language is keyed by the empty locale tag.
INVARIANT = ""


class StorageType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    TEXT = "text"


class StringResource(BaseModel):
    """One named string plus all of its locale-tagged translations."""

    name: str
    storage_location: str = ""
    translations: Dict[str, str] = Field(default_factory=dict)
    notes: Optional[str] = None

    def set_locale_text(self, locale: str, text: Optional[str]) -> None:
        self.translations[locale] = text or ""

    def get_locale_text(self, locale: str) -> str:
        return self.translations.get(locale, "")

    def locales(self) -> List[str]:
        return list(self.translations)

    @property
    def invariant_text(self) -> str:
        return self.get_locale_text(INVARIANT)

    @property
    def has_invariant_text(self) -> bool:
        """A record is only usable by the host once its invariant text is set."""
        return bool(self.invariant_text)


class ResultStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class OperationResult(BaseModel):
    """Outcome of writing one destination file."""

    path: Path
    project_name: str
    status: ResultStatus = ResultStatus.SUCCESS
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS
