"""Module: output.py

Author: Michael Economou
Date: 2026-09-22

Renders rename results as JSON or as one text line per entry.
"""

import json
import sys
from collections.abc import Sequence
from typing import TextIO

from cleanfy.config import JSON_INDENT
from cleanfy.models.rename_result import RenameResult


def format_result(result: RenameResult) -> str:
    """One human-readable line for a result."""
    if result.has_error:
        return f"ERR     {result.path} : {result.error}"
    if result.skipped:
        return f"SKIP    {result.old_name}"
    if result.is_unchanged:
        return f"OK      {result.old_name}"
    if result.auto_renamed:
        return f"RENAME* {result.old_name} -> {result.new_name}   (auto-resolved)"
    return f"RENAME  {result.old_name} -> {result.new_name}"


def emit_json(results: Sequence[RenameResult], stream: TextIO, pretty: bool = False) -> None:
    payload = [r.to_dict() for r in results]
    if pretty:
        text = json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)
    else:
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    stream.write(text + "\n")


def emit_results(
    results: Sequence[RenameResult],
    stream: TextIO | None = None,
    json_output: bool = False,
    pretty: bool = False,
    quiet: bool = False,
) -> None:
    """Write results to ``stream`` (stdout by default).

    ``pretty`` implies JSON. In quiet text mode only error lines are written.
    """
    stream = stream or sys.stdout

    if json_output or pretty:
        emit_json(results, stream, pretty=pretty)
        return

    for result in results:
        if quiet and not result.has_error:
            continue
        stream.write(format_result(result) + "\n")
    stream.flush()


def summarize(results: Sequence[RenameResult]) -> dict[str, int]:
    """Count results per outcome."""
    return {
        "total": len(results),
        "renamed": sum(1 for r in results if r.renamed),
        "auto_renamed": sum(1 for r in results if r.auto_renamed),
        "unchanged": sum(1 for r in results if r.is_unchanged and not r.skipped),
        "skipped": sum(1 for r in results if r.skipped),
        "errors": sum(1 for r in results if r.has_error),
    }
