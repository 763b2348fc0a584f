"""Module: case_transform_module.py

Author: Michael Economou
Date: 2026-09-16

Applies case transformations (lower, upper, title) to a name part.
"""

from cleanfy.models.transform_config import CaseMode
from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def to_title(text: str) -> str:
    """Capitalize the first letter or digit of every word, lower the rest.

    A word is any maximal run of letters and digits; every other character
    is copied unchanged and starts a new word.
    """
    out: list[str] = []
    start_of_word = True
    for char in text:
        if char.isalpha() or char.isdigit():
            out.append(char.title() if start_of_word else char.lower())
            start_of_word = False
        else:
            out.append(char)
            start_of_word = True
    return "".join(out)


class CaseTransformModule:
    """Logic component for the configured case transform."""

    @staticmethod
    def apply(text: str, mode: CaseMode) -> str:
        """Apply ``mode`` to ``text``; CaseMode.NONE returns it unmodified."""
        if mode is CaseMode.LOWER:
            return text.lower()
        if mode is CaseMode.UPPER:
            return text.upper()
        if mode is CaseMode.TITLE:
            return to_title(text)
        return text

    @staticmethod
    def applies_to_extension(mode: CaseMode) -> bool:
        """Title case is for the base name only; lower/upper also touch the extension."""
        return mode in (CaseMode.LOWER, CaseMode.UPPER)


def apply_case(text: str, mode: CaseMode | str) -> str:
    """Convenience wrapper accepting the mode as a string."""
    return CaseTransformModule.apply(text, CaseMode(mode))
