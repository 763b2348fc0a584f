"""Module: reserved_names.py

Author: Michael Economou
Date: 2026-09-17

Windows reserved device names (CON, PRN, AUX, NUL, COM1-9, LPT1-9).
"""

from cleanfy.config import RESERVED_NAME_PREFIX, RESERVED_NAMES


def is_reserved(name: str) -> bool:
    """True if ``name`` (extension already stripped) is a device name, any case."""
    return name.upper() in RESERVED_NAMES


def guard_reserved(name: str, stem: str) -> str:
    """Prefix ``name`` when its ``stem`` is a reserved device name."""
    if is_reserved(stem):
        return RESERVED_NAME_PREFIX + name
    return name
