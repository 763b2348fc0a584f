"""Module: cleanfy.config.naming

Author: Michael Economou
Date: 2026-09-14

Naming rules: safe character set, placeholder, collision suffix numbering
and Windows reserved device names.
"""

# Placeholder for unmapped non-ASCII characters and for empty names
PLACEHOLDER_CHAR = "_"

# Characters allowed in a cleaned name
SAFE_CHARS = "A-Za-z0-9._-"

# Characters trimmed from both ends of a cleaned name
TRIM_CHARS = "._-"

# First numeric suffix used by the collision resolver (file_2.txt)
UNIQUE_SUFFIX_START = 2
UNIQUE_SUFFIX_SEPARATOR = "_"

# Prefix added in front of names that collide with a reserved device name
RESERVED_NAME_PREFIX = "_"

RESERVED_NAMES = frozenset(
    {
        "CON",
        "PRN",
        "AUX",
        "NUL",
        "COM1",
        "COM2",
        "COM3",
        "COM4",
        "COM5",
        "COM6",
        "COM7",
        "COM8",
        "COM9",
        "LPT1",
        "LPT2",
        "LPT3",
        "LPT4",
        "LPT5",
        "LPT6",
        "LPT7",
        "LPT8",
        "LPT9",
    }
)
