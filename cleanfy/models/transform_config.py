"""Module: transform_config.py

Author: Michael Economou
Date: 2026-09-15

Run-scoped transform options. Built once from the command line and passed
explicitly to every pipeline call.
"""

import re
from dataclasses import dataclass
from enum import Enum

from cleanfy.config import (
    DEFAULT_CASE_MODE,
    DEFAULT_DATE_MODE,
    DEFAULT_DATE_STYLE,
    DEFAULT_DELIMITER,
    SAFE_CHARS,
)
from cleanfy.core.errors import ConfigError

_DELIMITER_RE = re.compile(rf"[{SAFE_CHARS}]*")


class CaseMode(str, Enum):
    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"


class DateMode(str, Enum):
    NONE = "none"
    MTIME = "mtime"  # Target's last modification time
    NOW = "now"  # Current wall-clock time


class DateStyle(str, Enum):
    ISO = "iso"
    COMPACT = "compact"
    MONTH = "month"
    SHORT = "short"
    WITHTIME = "withtime"


@dataclass(frozen=True)
class TransformConfig:
    """Immutable options read by every pipeline invocation."""

    case_mode: CaseMode = CaseMode(DEFAULT_CASE_MODE)
    date_mode: DateMode = DateMode(DEFAULT_DATE_MODE)
    date_style: DateStyle = DateStyle(DEFAULT_DATE_STYLE)
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        # The delimiter lands in the cleaned name after sanitizing
        if not _DELIMITER_RE.fullmatch(self.delimiter):
            raise ConfigError(f"invalid delimiter {self.delimiter!r} (allowed characters: {SAFE_CHARS})")

    @property
    def date_enabled(self) -> bool:
        return self.date_mode is not DateMode.NONE

    @classmethod
    def from_strings(
        cls,
        case: str = DEFAULT_CASE_MODE,
        date: str = DEFAULT_DATE_MODE,
        date_style: str = DEFAULT_DATE_STYLE,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> "TransformConfig":
        """Build a config from user-facing option values.

        Case and date modes are validated; an unknown date style falls back
        to ISO like the formatter itself does.

        Raises:
            ConfigError: If the case or date mode is not recognised, or the
                delimiter holds characters outside the safe set.

        """
        try:
            case_mode = CaseMode((case or DEFAULT_CASE_MODE).lower())
        except ValueError:
            choices = "|".join(m.value for m in CaseMode)
            raise ConfigError(f"invalid case mode {case!r} (expected {choices})") from None

        try:
            date_mode = DateMode((date or DEFAULT_DATE_MODE).lower())
        except ValueError:
            choices = "|".join(m.value for m in DateMode)
            raise ConfigError(f"invalid date mode {date!r} (expected {choices})") from None

        try:
            style = DateStyle((date_style or DEFAULT_DATE_STYLE).lower())
        except ValueError:
            style = DateStyle.ISO

        return cls(case_mode=case_mode, date_mode=date_mode, date_style=style, delimiter=delimiter)
