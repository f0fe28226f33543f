from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_props():
    """Write latin-1 text to ``root/relative``, creating folders."""

    def _write(root: Path, relative: str, text: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("latin-1"))
        return path

    return _write
