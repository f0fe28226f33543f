"""Locale tags embedded in resource file names.

``strings.properties`` holds the invariant language, ``strings_de.properties``
and ``strings_de-DE.properties`` hold translations. A stem that merely looks
like it carries a tag (``my_labels``) is read as a translation of ``my``; the
naming scheme cannot tell the two apart.
"""

from __future__ import annotations

import re
from pathlib import PurePath

from .models import INVARIANT

# Suffix of the stem: "_xx-YY" or "_xx" (2+ letters each part).
LOCALE_RE = re.compile(r"_(?P<locale>[a-z]{2,}-[A-Z]{2,}|[a-z]{2,})$")
TAG_RE = re.compile(r"^[a-z]{2,}(-[A-Z]{2,})?$")


def _stem(file_name: str | PurePath) -> str:
    # Only the file name counts; directory names never carry a locale.
    name = PurePath(file_name).name
    base, dot, _ext = name.rpartition(".")
    return base if dot and base else name


def extract_locale(file_name: str | PurePath) -> str:
    m = LOCALE_RE.search(_stem(file_name))
    return m.group("locale") if m else INVARIANT


def strip_locale(stem: str) -> str:
    """Drop a trailing ``_tag`` from a stem, leaving the base name."""
    return LOCALE_RE.sub("", stem, count=1)


def locale_suffix(locale: str) -> str:
    return f"_{locale}" if locale else ""


def is_locale_tag(value: str) -> bool:
    return value == INVARIANT or bool(TAG_RE.match(value))
