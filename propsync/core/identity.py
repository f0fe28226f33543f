"""Logical identity of a resource file.

All locale variants of one resource group share an identity made of the
directory relative to the root and the base name without its locale suffix,
e.g. ``sub/strings`` for ``<root>/sub/strings_de-DE.properties``.
"""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Optional

from .errors import ResourcePathError
from .locale import locale_suffix, strip_locale

SEPARATOR = "/"


def resolve_identity(root: Path, file_path: Path, locale: Optional[str] = None) -> str:
    try:
        relative = file_path.relative_to(root)
    except ValueError as e:
        raise ResourcePathError(f"{file_path} is not beneath {root}") from e

    stem = relative.stem
    if locale is None:
        stem = strip_locale(stem)
    elif locale and stem.endswith(locale_suffix(locale)):
        stem = stem[: -len(locale_suffix(locale))]

    parts = list(relative.parent.parts) + [stem]
    return SEPARATOR.join(p for p in parts if p not in ("", "."))


def destination_path(root: Path, storage_location: str, locale: str, extension: str) -> Path:
    """Inverse of :func:`resolve_identity` for a given locale."""
    location = PurePath(*storage_location.split(SEPARATOR)) if storage_location else PurePath()
    name = f"{location.name}{locale_suffix(locale)}{extension}"
    return root / location.parent / name
