"""Domain datatypes for scanned files and folders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Item:
    """One scanned file or folder with its byte size and selection mark."""

    path: Path
    size: int
    is_selected: bool = False


Collection = tuple[Item, ...]


class ViewMode(Enum):
    FILES = "files"
    FOLDERS = "folders"

    def toggled(self) -> ViewMode:
        return ViewMode.FOLDERS if self is ViewMode.FILES else ViewMode.FILES


@dataclass(frozen=True)
class ScanResult:
    """Both size-sorted collections produced by one scan of ``root``."""

    root: Path
    files: Collection = ()
    folders: Collection = ()


__all__ = [
    "Item",
    "Collection",
    "ViewMode",
    "ScanResult",
]
