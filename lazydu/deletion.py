"""Filesystem removal used by confirmed deletes."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .errors import DeleteError

log = logging.getLogger(__name__)


def remove_path(path: Path) -> None:
    """Remove ``path`` from disk, recursively for real directories.

    Symlinks are unlinked, never followed. A path that no longer exists counts
    as removed; an ancestor folder deleted earlier in the same batch takes its
    descendants with it.
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        log.info("already gone: %s", path)
        return
    except OSError as exc:
        log.warning("delete failed for %s: %s", path, exc)
        raise DeleteError(path, exc) from exc
    log.info("deleted %s", path)


__all__ = ["remove_path"]
