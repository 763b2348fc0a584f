"""Module: rename_result.py

Author: Michael Economou
Date: 2026-09-15

Outcome of processing one file or directory.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class RenameResult:
    """Result of a single rename attempt.

    Attributes:
        path: Full path of the entry (the new path after a committed rename)
        old_name: Original name
        new_name: Proposed or applied name (empty when the pipeline failed)
        is_dir: True if the entry is a directory
        renamed: True if a rename actually happened on disk
        auto_renamed: True if a numeric suffix was added to avoid a collision
        skipped: True for hidden entries left alone
        error: Error message, if any

    """

    path: str
    old_name: str = ""
    new_name: str = ""
    is_dir: bool = False
    renamed: bool = False
    auto_renamed: bool = False
    skipped: bool = False
    error: str | None = None

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    @property
    def is_changed(self) -> bool:
        """True if the name was altered on disk or auto-renamed."""
        return self.renamed or self.auto_renamed

    @property
    def is_unchanged(self) -> bool:
        return not self.has_error and (not self.new_name or self.new_name == self.old_name)

    def to_dict(self) -> dict[str, Any]:
        """Serializable form; ``error`` and ``skipped`` only appear when set."""
        data: dict[str, Any] = {
            "path": self.path,
            "old_name": self.old_name,
            "new_name": self.new_name,
            "is_dir": self.is_dir,
            "renamed": self.renamed,
            "auto_renamed": self.auto_renamed,
        }
        if self.skipped:
            data["skipped"] = True
        if self.error:
            data["error"] = self.error
        return data
