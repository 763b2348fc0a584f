"""Module: walker.py

Author: Michael Economou
Date: 2026-09-20

Enumerates the entries to process for a list of command-line targets.
"""

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """One entry to process, or a traversal error for ``path``."""

    path: str
    is_dir: bool = False
    error: str | None = None


def walk_targets(targets: Iterable[str], recursive: bool = False) -> Iterator[WalkEntry]:
    """Yield the entries below each target.

    A file target yields itself. A directory target yields its direct
    entries, or with ``recursive`` its whole subtree. Subtrees are walked
    bottom-up so children always come before their parent directory and a
    committed directory rename never invalidates a path still to be
    visited. Directory targets themselves are not yielded. Entries are sorted
    by name for a stable order.
    """
    targets = list(targets) or ["."]

    for root in targets:
        try:
            is_dir = os.path.isdir(root)
            if not is_dir:
                os.lstat(root)
        except OSError as e:
            yield WalkEntry(path=root, error=e.strerror or str(e))
            continue

        if not is_dir:
            yield WalkEntry(path=root, is_dir=False)
        elif recursive:
            yield from _walk_tree(root)
        else:
            yield from _list_dir(root)


def _list_dir(root: str) -> Iterator[WalkEntry]:
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        yield WalkEntry(path=root, is_dir=True, error=e.strerror or str(e))
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            yield WalkEntry(path=entry.path, error=e.strerror or str(e))
            continue
        yield WalkEntry(path=entry.path, is_dir=is_dir)


def _walk_tree(root: str) -> Iterator[WalkEntry]:
    errors: list[OSError] = []

    for dirpath, dirnames, filenames in os.walk(root, topdown=False, onerror=errors.append):
        while errors:
            e = errors.pop(0)
            yield WalkEntry(path=e.filename or dirpath, is_dir=True, error=e.strerror or str(e))

        for name in sorted(filenames):
            yield WalkEntry(path=os.path.join(dirpath, name), is_dir=False)
        for name in sorted(dirnames):
            path = os.path.join(dirpath, name)
            # Symlinks to directories are listed in dirnames but not descended into
            yield WalkEntry(path=path, is_dir=not os.path.islink(path))

    for e in errors:
        yield WalkEntry(path=e.filename or root, is_dir=True, error=e.strerror or str(e))
