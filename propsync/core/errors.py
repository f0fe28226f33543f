"""Error types raised while reading and writing resource trees."""

from __future__ import annotations


class PropsyncError(Exception):
    """Base class for every error raised by propsync."""


class StorageLocationError(PropsyncError):
    """The configured storage location is blank or does not point at a directory."""


class ResourcePathError(PropsyncError):
    """A resource file lies outside the root it is resolved against."""


class ResourceReadError(PropsyncError):
    """A resource file could not be read."""

    def __init__(self, path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def base_exception(exc: BaseException) -> BaseException:
    """Follow the cause/context chain down to the innermost exception."""
    seen = {id(exc)}
    while True:
        inner = exc.__cause__ or exc.__context__
        if inner is None or id(inner) in seen:
            return exc
        seen.add(id(inner))
        exc = inner


def base_message(exc: BaseException) -> str:
    """Message of the innermost exception, used in per-file outcomes."""
    root = base_exception(exc)
    if isinstance(root, OSError) and root.strerror:
        # "[Errno 13] Permission denied: 'x'" -> "Permission denied: 'x'"
        if root.filename is not None:
            return f"{root.strerror}: {root.filename!r}"
        return root.strerror
    return str(root) or root.__class__.__name__
