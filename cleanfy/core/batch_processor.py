"""Module: batch_processor.py

Author: Michael Economou
Date: 2026-09-21

Batch driver: walks the targets and hands every entry to the RenameExecutor.

Committed renames always run sequentially, in walk order. Dry runs may fan
the pipeline out over a ThreadPoolExecutor since entries share no mutable
state; results are still returned in walk order.
"""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

import psutil

from cleanfy.config import PARALLEL_PREVIEW_MAX_WORKERS, PARALLEL_PREVIEW_WORKER_CAP
from cleanfy.core.rename_executor import RenameExecutor
from cleanfy.core.walker import WalkEntry, walk_targets
from cleanfy.models.rename_result import RenameResult
from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def optimal_worker_count(max_workers: int | None = PARALLEL_PREVIEW_MAX_WORKERS) -> int:
    """Worker threads for a parallel preview.

    The pipeline is mostly I/O bound (stat calls), so use 2x the CPU cores,
    capped to keep thread overhead in check.
    """
    if max_workers is not None:
        return max(1, max_workers)
    cpu_count = psutil.cpu_count(logical=True) or 1
    return min(cpu_count * 2, PARALLEL_PREVIEW_WORKER_CAP)


class BatchProcessor:
    """Runs one executor over every entry found below the targets."""

    def __init__(self, executor: RenameExecutor, recursive: bool = False, jobs: int = 1) -> None:
        self.executor = executor
        self.recursive = recursive
        self.jobs = jobs

    def run(self, targets: Iterable[str]) -> list[RenameResult]:
        entries = list(walk_targets(targets, recursive=self.recursive))
        logger.debug("[BatchProcessor] %d entries to process", len(entries))

        if self.executor.dry_run and self.jobs != 1 and len(entries) > 1:
            results = self._run_parallel(entries)
        else:
            results = [self._process(entry) for entry in entries]

        errors = sum(1 for r in results if r.has_error)
        if errors:
            logger.warning("[BatchProcessor] %d of %d entries failed", errors, len(results))
        return results

    def _process(self, entry: WalkEntry) -> RenameResult:
        if entry.error:
            return RenameResult(path=entry.path, is_dir=entry.is_dir, error=entry.error)
        return self.executor.process(entry.path, entry.is_dir)

    def _run_parallel(self, entries: list[WalkEntry]) -> list[RenameResult]:
        workers = optimal_worker_count(self.jobs if self.jobs > 0 else None)
        logger.debug("[BatchProcessor] Parallel preview with %d workers", workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._process, entries))
