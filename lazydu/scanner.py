"""Filesystem scan that ranks files and folders by size.

The walk visits every non-hidden entry below the root once. Folder totals are
aggregated bottom-up from their descendants, so no subtree is read twice.
Failures below the root are skipped silently (logged at debug level).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import DirectorySizeError, ScanIOError, WalkEntryError
from .types import Item, ScanResult

log = logging.getLogger(__name__)


def is_hidden_name(name: str) -> bool:
    """Return whether a base name is excluded from scans."""
    return name.startswith(".")


def _list_visible(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as entries:
        return [entry for entry in entries if not is_hidden_name(entry.name)]


def _sorted_by_size(items: list[Item]) -> tuple[Item, ...]:
    # list.sort is stable with reverse=True, so equal sizes keep walk order.
    return tuple(sorted(items, key=lambda item: item.size, reverse=True))


@dataclass
class _Frame:
    """One directory on the walk stack, summing its children as they finish."""

    directory: Path
    entries: Iterator[os.DirEntry]
    total: int = 0
    failure: BaseException | None = None


class _TreeWalker:
    """Accumulates files and folder totals for one scan.

    The walk keeps its own stack of open directories, so tree depth is bounded
    by the filesystem rather than the interpreter's recursion limit. A folder
    is recorded once all of its children are done (post-order).
    """

    def __init__(self) -> None:
        self.files: list[Item] = []
        self.folders: list[Item] = []

    def collect(self, directory: Path, entries: list[os.DirEntry]) -> int:
        """Record the subtree under ``entries`` of ``directory``; return its size.

        Raises ``DirectorySizeError`` after recording whatever could be read
        when any entry in the subtree failed.
        """
        stack = [_Frame(directory, iter(entries))]
        while True:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                if not stack:
                    if frame.failure is not None:
                        raise DirectorySizeError(directory, frame.failure)
                    return frame.total
                self._finish(frame, stack[-1])
                continue

            path = Path(entry.path)
            try:
                child = self._visit(entry, path)
            except DirectorySizeError as exc:
                log.debug("omitting folder %s: %s", exc.path, exc.cause)
                frame.failure = exc
            except WalkEntryError as exc:
                log.debug("skipping entry %s: %s", exc.path, exc.cause)
                frame.failure = exc
            else:
                if isinstance(child, _Frame):
                    stack.append(child)
                else:
                    frame.total += child

    def _finish(self, frame: _Frame, parent: _Frame) -> None:
        if frame.failure is not None:
            log.debug("omitting folder %s: incomplete subtree", frame.directory)
            parent.failure = DirectorySizeError(frame.directory, frame.failure)
            return
        self.folders.append(Item(path=frame.directory, size=frame.total))
        parent.total += frame.total

    def _visit(self, entry: os.DirEntry, path: Path) -> _Frame | int:
        """Return a stack frame for a directory or the size of anything else."""
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise WalkEntryError(path, exc) from exc

        if is_dir:
            try:
                children = _list_visible(path)
            except OSError as exc:
                raise DirectorySizeError(path, exc) from exc
            return _Frame(path, iter(children))

        try:
            size = int(entry.stat(follow_symlinks=False).st_size)
        except OSError as exc:
            raise WalkEntryError(path, exc) from exc
        self.files.append(Item(path=path, size=size))
        return size


def resolve_root(root: Path | str) -> Path:
    """Return the absolute scan root or raise ``ScanIOError``."""
    try:
        resolved = Path(root).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ScanIOError(root, exc) from exc
    if not resolved.is_dir():
        raise ScanIOError(resolved, NotADirectoryError("not a directory"))
    return resolved


def scan(root: Path | str) -> ScanResult:
    """Walk ``root`` and return files and folders sorted by descending size.

    The root itself is not reported as a folder. Hidden entries (base name
    starting with ``.``) are excluded along with everything below them.
    Folders whose subtree could not be summed completely are omitted.
    """
    resolved = resolve_root(root)
    try:
        entries = _list_visible(resolved)
    except OSError as exc:
        raise ScanIOError(resolved, exc) from exc

    walker = _TreeWalker()
    try:
        walker.collect(resolved, entries)
    except DirectorySizeError as exc:
        log.debug("scan of %s was incomplete: %s", resolved, exc.cause)

    log.info(
        "scanned %s: %d files, %d folders",
        resolved,
        len(walker.files),
        len(walker.folders),
    )
    return ScanResult(
        root=resolved,
        files=_sorted_by_size(walker.files),
        folders=_sorted_by_size(walker.folders),
    )


__all__ = [
    "is_hidden_name",
    "resolve_root",
    "scan",
]
