from __future__ import annotations

from .merger import export_resources
from .session import ExportSession

__all__ = ["ExportSession", "export_resources"]
