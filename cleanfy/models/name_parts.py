"""Module: name_parts.py

Author: Michael Economou
Date: 2026-09-15

Base/extension split used by both the naming pipeline and the
collision resolver.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NameParts:
    """A name split into base and extension (extension without the dot)."""

    base: str
    extension: str = ""

    def join(self) -> str:
        """Reassemble as ``base`` or ``base.extension``."""
        if self.extension:
            return f"{self.base}.{self.extension}"
        return self.base

    def with_base(self, base: str) -> "NameParts":
        return NameParts(base, self.extension)


def split_name(name: str, is_dir: bool = False) -> NameParts:
    """Split a name at its last dot.

    Directories are never split. For files, the last dot only counts as a
    separator when it is neither the first nor the last character, so
    ``.bashrc`` and ``notes.`` have no extension.
    """
    if is_dir:
        return NameParts(name)

    index = name.rfind(".")
    if 0 < index < len(name) - 1:
        return NameParts(name[:index], name[index + 1 :])
    return NameParts(name)
