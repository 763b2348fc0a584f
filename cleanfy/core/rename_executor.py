"""Module: rename_executor.py

Author: Michael Economou
Date: 2026-09-20

Per-entry rename workflow:
1. Skip hidden entries unless dotfiles are enabled
2. Run the name pipeline
3. Stop at the preview in dry-run mode
4. Resolve an occupied target (numeric suffix) or report the conflict
5. Rename on disk

Every failure is returned as a RenameResult carrying the error, so one bad
entry never stops the batch.
"""

import os
from collections.abc import Callable

from cleanfy.config import DEFAULT_DOTFILES, DEFAULT_DRY_RUN, DEFAULT_UNIQUE
from cleanfy.core.conflict_resolver import ExistsFunc, resolve
from cleanfy.core.errors import CleanfyError, DestinationExistsError
from cleanfy.core.name_pipeline import NamePipeline
from cleanfy.models.rename_result import RenameResult
from cleanfy.models.transform_config import TransformConfig
from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

RenameFunc = Callable[[str, str], None]


def is_hidden(name: str) -> bool:
    return name.startswith(".") and len(name) > 1


class RenameExecutor:
    """Applies the name pipeline to single entries and commits the renames.

    Attributes:
        pipeline: NamePipeline bound to the run's TransformConfig
        dry_run: Only compute the new names
        unique: Auto-resolve occupied targets with a numeric suffix
        dotfiles: Process hidden entries too

    """

    def __init__(
        self,
        config: TransformConfig,
        dry_run: bool = DEFAULT_DRY_RUN,
        unique: bool = DEFAULT_UNIQUE,
        dotfiles: bool = DEFAULT_DOTFILES,
        exists: ExistsFunc | None = None,
        rename: RenameFunc | None = None,
    ) -> None:
        self.pipeline = NamePipeline(config)
        self.dry_run = dry_run
        self.unique = unique
        self.dotfiles = dotfiles
        self._exists = exists or os.path.lexists
        self._rename = rename or os.rename

    def preview(self, path: str, is_dir: bool | None = None) -> RenameResult:
        """Compute the new name for ``path`` without touching the filesystem."""
        name = os.path.basename(os.path.normpath(path))
        if is_dir is None:
            is_dir = os.path.isdir(path)

        if is_hidden(name) and not self.dotfiles:
            logger.debug("[RenameExecutor] Skipping hidden entry: %s", path)
            return RenameResult(path=path, old_name=name, new_name=name, is_dir=is_dir, skipped=True)

        try:
            new_name = self.pipeline.clean(path, name, is_dir)
        except CleanfyError as e:
            logger.warning("[RenameExecutor] %s: %s", path, e)
            return RenameResult(path=path, old_name=name, is_dir=is_dir, error=str(e))

        return RenameResult(path=path, old_name=name, new_name=new_name, is_dir=is_dir)

    def process(self, path: str, is_dir: bool | None = None) -> RenameResult:
        """Preview ``path`` and, unless in dry-run mode, rename it."""
        result = self.preview(path, is_dir)
        if result.has_error or result.skipped or result.is_unchanged or self.dry_run:
            return result
        return self.commit(result)

    def commit(self, result: RenameResult) -> RenameResult:
        """Rename ``result.path`` to ``result.new_name`` in its directory."""
        old_path = result.path
        directory = os.path.dirname(os.path.normpath(old_path))
        new_name = result.new_name
        new_path = os.path.join(directory, new_name)
        auto_renamed = False

        if self._exists(new_path) and not _same_entry(old_path, new_path):
            if not self.unique:
                error = DestinationExistsError(new_path)
                logger.warning("[RenameExecutor] %s -> %s: %s", old_path, new_name, error)
                result.error = str(error)
                return result

            resolution = resolve(directory, new_name, exists=self._exists)
            new_path, new_name, auto_renamed = resolution.path, resolution.name, resolution.auto_renamed

        try:
            self._rename(old_path, new_path)
        except OSError as e:
            logger.error("[RenameExecutor] Rename failed %s -> %s: %s", old_path, new_path, e)
            result.new_name = new_name
            result.error = e.strerror or str(e)
            return result

        logger.info("[RenameExecutor] Renamed %s -> %s", old_path, new_name)
        result.path = new_path
        result.new_name = new_name
        result.renamed = True
        result.auto_renamed = auto_renamed
        return result


def _same_entry(old_path: str, new_path: str) -> bool:
    """True when both paths name the same entry (case-only rename on a
    case-insensitive filesystem)."""
    try:
        return os.path.samefile(old_path, new_path)
    except OSError:
        return False
