"""Module: posix_sanitizer.py

Author: Michael Economou
Date: 2026-09-16

Restricts a name to the portable POSIX filename character set.
"""

import re

from cleanfy.config import PLACEHOLDER_CHAR, SAFE_CHARS, TRIM_CHARS

_DISALLOWED_RE = re.compile(f"[^{SAFE_CHARS}]+")
_MULTI_UNDERSCORE_RE = re.compile(r"_{2,}")
_MULTI_DASH_RE = re.compile(r"-{2,}")


def sanitize(text: str) -> str:
    """Return a non-empty name made only of ``[A-Za-z0-9._-]``.

    Spaces and every run of other disallowed characters become a single
    underscore, repeated underscores and dashes collapse, and leading or
    trailing dots, underscores and dashes are trimmed. An empty input, or
    one with nothing left after trimming, gives the placeholder.

    The function is idempotent.
    """
    if not text:
        return PLACEHOLDER_CHAR

    text = text.replace(" ", "_")
    text = _DISALLOWED_RE.sub("_", text)
    text = _MULTI_UNDERSCORE_RE.sub("_", text)
    text = _MULTI_DASH_RE.sub("-", text)
    text = text.strip(TRIM_CHARS)

    return text or PLACEHOLDER_CHAR
