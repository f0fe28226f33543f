from __future__ import annotations

from .merger import find_resource_files, import_resources

__all__ = ["find_resource_files", "import_resources"]
