"""Module: date_formatter.py

Author: Michael Economou
Date: 2026-09-17

Date prefix support: resolves the timestamp source for an entry and renders
it in one of a fixed set of layouts.
"""

import os
from datetime import datetime

from cleanfy.core.errors import MetadataReadError
from cleanfy.models.transform_config import DateMode, DateStyle
from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

DATE_LAYOUTS: dict[DateStyle, str] = {
    DateStyle.ISO: "%Y-%m-%d",
    DateStyle.COMPACT: "%Y%m%d",
    DateStyle.MONTH: "%Y-%m",
    DateStyle.SHORT: "%y%m%d",
    DateStyle.WITHTIME: "%Y-%m-%dT%H.%M.%S",
}


def format_date(moment: datetime, style: DateStyle | str) -> str:
    """Render ``moment`` with the layout for ``style``.

    Unknown styles fall back to the ISO calendar date.
    """
    try:
        style = DateStyle(style)
    except ValueError:
        logger.debug("[DateFormatter] Unknown style %r, using iso", style)
        style = DateStyle.ISO
    return moment.strftime(DATE_LAYOUTS[style])


def resolve_timestamp(
    path: str,
    mode: DateMode,
    now: datetime | None = None,
) -> datetime | None:
    """Return the moment used for the date prefix of ``path``.

    Args:
        path: Full path of the entry (only read for DateMode.MTIME)
        mode: Timestamp source
        now: Override for the current time

    Returns:
        datetime | None: Local time, or None when dating is disabled

    Raises:
        MetadataReadError: If the modification time cannot be read.

    """
    if mode is DateMode.NONE:
        return None

    if mode is DateMode.NOW:
        return now or datetime.now()

    try:
        mtime = os.stat(path).st_mtime
    except OSError as e:
        logger.debug("[DateFormatter] Cannot stat %s: %s", path, e)
        raise MetadataReadError(path, e) from e

    if mtime == 0:
        logger.debug("[DateFormatter] Zero mtime for %s, using current time", path)
        return now or datetime.now()

    return datetime.fromtimestamp(mtime)
