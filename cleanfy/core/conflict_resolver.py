"""Module: conflict_resolver.py

Author: Michael Economou
Date: 2026-09-18

Conflict resolution for rename targets that already exist.

The resolver probes ``base_2.ext``, ``base_3.ext``, ... against an injected
existence check and returns the first free candidate. It only sees the
directory state at call time: another process creating the same name between
the probe and the rename is not guarded against, and the rename itself then
fails or overwrites depending on the platform.
"""

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from cleanfy.config import UNIQUE_SUFFIX_SEPARATOR, UNIQUE_SUFFIX_START
from cleanfy.models.name_parts import NameParts, split_name
from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

ExistsFunc = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class Resolution:
    """Conflict resolution result."""

    path: str
    name: str
    auto_renamed: bool


def numbered_name(parts: NameParts, counter: int) -> str:
    """``base_<counter>`` with the extension reattached."""
    return parts.with_base(f"{parts.base}{UNIQUE_SUFFIX_SEPARATOR}{counter}").join()


def resolve(directory: str, desired_name: str, exists: ExistsFunc | None = None) -> Resolution:
    """Find a free variant of ``desired_name`` inside ``directory``.

    Args:
        directory: Directory the name must be unique in
        desired_name: The name that is already taken
        exists: Existence check for a full path (defaults to os.path.lexists)

    Returns:
        Resolution: First candidate absent from the directory

    """
    exists = exists or os.path.lexists
    parts = split_name(desired_name)

    counter = UNIQUE_SUFFIX_START
    while True:
        candidate = numbered_name(parts, counter)
        full_path = os.path.join(directory, candidate)
        if not exists(full_path):
            logger.debug("[ConflictResolver] %s taken, using %s", desired_name, candidate)
            return Resolution(path=full_path, name=candidate, auto_renamed=True)
        counter += 1


def snapshot_exists(names: Iterable[str]) -> ExistsFunc:
    """Build an existence check from a snapshot of directory entry names."""
    taken = frozenset(names)

    def exists(path: str) -> bool:
        return os.path.basename(path) in taken

    return exists
