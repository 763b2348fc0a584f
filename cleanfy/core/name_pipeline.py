"""Module: name_pipeline.py

Author: Michael Economou
Date: 2026-09-18

Name pipeline: turns an original file or directory name into its cleaned form.

Steps (each depends on the previous one):
1. Split base and extension (directories are never split)
2. Fold base and extension to ASCII
3. Sanitize base and extension to the POSIX character set
4. Apply the case transform
5. Prepend the date prefix, if enabled
6. Reassemble
7. Reject an empty result
8. Guard against reserved device names

The pipeline only reads file metadata (for the mtime date prefix); it never
writes to the filesystem.
"""

import os
from datetime import datetime

from cleanfy.core.errors import EmptyResultError
from cleanfy.models.name_parts import NameParts, split_name
from cleanfy.models.transform_config import TransformConfig
from cleanfy.modules.ascii_folder import AsciiFolder
from cleanfy.modules.case_transform_module import CaseTransformModule
from cleanfy.modules.date_formatter import format_date, resolve_timestamp
from cleanfy.modules.posix_sanitizer import sanitize
from cleanfy.modules.reserved_names import guard_reserved
from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class NamePipeline:
    """Deterministic name transform bound to one TransformConfig.

    Holds no mutable state, so one instance can be shared between threads.
    """

    def __init__(self, config: TransformConfig, folder: AsciiFolder | None = None) -> None:
        self.config = config
        self.folder = folder or AsciiFolder()

    def clean(self, full_path: str, name: str, is_dir: bool, now: datetime | None = None) -> str:
        """Return the cleaned name for one entry.

        Args:
            full_path: Path of the entry, used to read its modification time
            name: Original name (last path component)
            is_dir: True for directories (no extension split)
            now: Override for the current time (DateMode.NOW and zero mtimes)

        Returns:
            str: The cleaned name

        Raises:
            MetadataReadError: If the mtime date prefix cannot be resolved.
            EmptyResultError: If the transform produced an empty name.

        """
        parts = split_name(name, is_dir)

        base = self.folder.fold(parts.base)
        ext = self.folder.fold(parts.extension)

        base = sanitize(base)
        if ext:
            ext = sanitize(ext)

        case_mode = self.config.case_mode
        base = CaseTransformModule.apply(base, case_mode)
        if CaseTransformModule.applies_to_extension(case_mode):
            ext = CaseTransformModule.apply(ext, case_mode)

        if self.config.date_enabled:
            moment = resolve_timestamp(full_path, self.config.date_mode, now=now)
            if moment is not None:
                prefix = format_date(moment, self.config.date_style)
                base = f"{prefix}{self.config.delimiter}{base}"

        new_name = NameParts(base, ext).join()
        if not new_name:
            raise EmptyResultError(name)

        stem, _ = os.path.splitext(new_name)
        new_name = guard_reserved(new_name, stem)

        if new_name != name:
            logger.debug("[NamePipeline] %s -> %s", name, new_name)
        return new_name


def clean_name(
    full_path: str,
    name: str,
    is_dir: bool,
    config: TransformConfig | None = None,
) -> str:
    """One-shot form of NamePipeline.clean."""
    return NamePipeline(config or TransformConfig()).clean(full_path, name, is_dir)
