"""Exception types raised by scanning and deletion."""

from __future__ import annotations

from pathlib import Path


class LazyduError(Exception):
    """Base class for lazydu failures."""


class ScanIOError(LazyduError, OSError):
    """Scan root cannot be resolved, opened, or listed."""

    def __init__(self, path: Path | str, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"cannot scan {self.path}{detail}")


class WalkEntryError(LazyduError):
    """One directory entry could not be inspected during traversal."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class DirectorySizeError(LazyduError):
    """A folder total could not be computed because part of its subtree failed."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"incomplete size for {path}{detail}")


class DeleteError(LazyduError):
    """Removing a selected item from the filesystem failed."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to delete {path}: {cause}")


__all__ = [
    "LazyduError",
    "ScanIOError",
    "WalkEntryError",
    "DirectorySizeError",
    "DeleteError",
]
