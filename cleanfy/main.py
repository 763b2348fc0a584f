"""Module: main.py

Author: Michael Economou
Date: 2026-09-22

Command-line entry point: parses options, builds the TransformConfig,
runs the batch and prints the results.

Exit status: 0 when every entry succeeded, 1 when at least one failed,
2 for usage errors.
"""

import argparse
import platform
import sys

from cleanfy import get_version
from cleanfy.config import (
    APP_DESCRIPTION,
    APP_NAME,
    DEFAULT_CASE_MODE,
    DEFAULT_DATE_MODE,
    DEFAULT_DATE_STYLE,
    DEFAULT_DELIMITER,
    DEFAULT_UNIQUE,
)
from cleanfy.core.batch_processor import BatchProcessor
from cleanfy.core.errors import ConfigError
from cleanfy.core.rename_executor import RenameExecutor
from cleanfy.models.transform_config import CaseMode, DateMode, DateStyle, TransformConfig
from cleanfy.utils.logging.init_logging import init_logging
from cleanfy.utils.output import emit_results, summarize


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        epilog="Without -d only a preview is printed; nothing is renamed.",
    )
    parser.add_argument("targets", nargs="*", metavar="PATH", help="files or directories (default: .)")

    parser.add_argument("-d", "--do", action="store_true", help="perform actual renaming (default: preview only)")
    parser.add_argument("-r", "--recursive", action="store_true", help="recurse into subdirectories")
    parser.add_argument("-q", "--quiet", action="store_true", help="suppress normal output (show only errors)")
    parser.add_argument("-j", "--json", action="store_true", help="print results as JSON")
    parser.add_argument("-p", "--pretty", action="store_true", help="pretty-print JSON output (implies -j)")
    parser.add_argument("-v", "--version", action="store_true", help="show program version and exit")

    parser.add_argument(
        "--case",
        default=DEFAULT_CASE_MODE,
        type=str.lower,
        choices=[m.value for m in CaseMode],
        help="case transform (default: %(default)s)",
    )
    parser.add_argument(
        "--date",
        default=DEFAULT_DATE_MODE,
        type=str.lower,
        choices=[m.value for m in DateMode],
        help="date prefix source (default: %(default)s)",
    )
    parser.add_argument(
        "--date-style",
        default=DEFAULT_DATE_STYLE,
        metavar="STYLE",
        help=f"date layout: {'|'.join(s.value for s in DateStyle)} (default: %(default)s)",
    )
    parser.add_argument("--delim", default=DEFAULT_DELIMITER, help="delimiter between date and name (default: %(default)s)")

    parser.add_argument(
        "--unique",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_UNIQUE,
        help="auto-resolve name conflicts by adding numeric suffixes",
    )
    parser.add_argument("--dotfiles", action="store_true", help="also rename hidden entries")
    parser.add_argument(
        "--jobs",
        type=_non_negative_int,
        default=1,
        metavar="N",
        help="worker threads for previews, 0 = auto (default: %(default)s)",
    )

    parser.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--log-dir", default=None, help="also write rotating log files to this directory")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"{APP_NAME} {get_version()} ({platform.system().lower()}/{platform.machine().lower()})")
        return 0

    logger = init_logging(APP_NAME, verbose=args.verbose, log_dir=args.log_dir)

    try:
        config = TransformConfig.from_strings(
            case=args.case, date=args.date, date_style=args.date_style, delimiter=args.delim
        )
    except ConfigError as e:
        parser.error(str(e))

    executor = RenameExecutor(config, dry_run=not args.do, unique=args.unique, dotfiles=args.dotfiles)
    processor = BatchProcessor(executor, recursive=args.recursive, jobs=args.jobs)

    logger.debug("[main] Config: %s | dry_run=%s unique=%s", config, executor.dry_run, executor.unique)
    results = processor.run(args.targets)

    emit_results(results, json_output=args.json, pretty=args.pretty, quiet=args.quiet)

    counts = summarize(results)
    logger.info(
        "[main] %d entries: %d renamed (%d auto-resolved), %d unchanged, %d skipped, %d errors",
        counts["total"],
        counts["renamed"],
        counts["auto_renamed"],
        counts["unchanged"],
        counts["skipped"],
        counts["errors"],
    )
    return 1 if counts["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
