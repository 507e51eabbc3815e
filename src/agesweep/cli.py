from __future__ import annotations

import argparse
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from agesweep import __version__
from agesweep.deletion import delete_all, present_and_confirm, present_candidates
from agesweep.filtering import compute_cutoff, filter_by_age
from agesweep.logs import LoggingConfig, configure_logging
from agesweep.prompts import Reader, Signal, read_directory_path, read_threshold
from agesweep.scanner import scan_directory

BANNER = (
    "\n"
    "Welcome to agesweep, a quick way to clean up your directories of old and\n"
    "unused files. Files are cleaned up based on your requirements. If you would\n"
    "like files older than 5 days from today's date to disappear just choose 5.\n"
)
FAREWELL = "Files redeemed. Goodbye!"
DECLINED = "Nothing was deleted."
NOTHING_TO_DELETE = "No files are old enough to delete."
DRY_RUN_DONE = "Dry-run complete. Nothing was deleted."


def main(argv: Iterable[str] | None = None, read: Reader = input) -> int:
    parser = argparse.ArgumentParser(
        prog="agesweep",
        description=(
            "Delete files in a directory that were created on or before a cutoff "
            "date. Every deletion is listed and confirmed first."
        ),
    )
    parser.add_argument(
        "--days",
        type=_non_negative_int,
        default=None,
        help="How far back to go, in days (prompted when omitted)",
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Directory to clean (prompted when omitted)",
    )
    parser.add_argument(
        "--max-days",
        type=_non_negative_int,
        default=None,
        help="Reject thresholds above this many days (unbounded by default)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--dry-run",
        action="store_true",
        help="List deletable files and exit without deleting",
    )
    mode.add_argument(
        "--yes",
        action="store_true",
        help="Confirm deletion without asking",
    )
    parser.add_argument("--log-level", default="WARNING", help="Diagnostic log level")
    parser.add_argument("--log-file", default=None, help="Also write diagnostics here")
    parser.add_argument("--no-banner", action="store_true", help="Skip the welcome text")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(LoggingConfig(level=args.log_level, log_file=args.log_file), force=True)

    if args.max_days is not None and args.days is not None and args.days > args.max_days:
        raise SystemExit(f"--days {args.days} is above --max-days {args.max_days}")

    root: Path | None = None
    if args.path is not None:
        root = Path(args.path).expanduser().resolve()
        if not root.exists() or not root.is_dir():
            raise SystemExit(f"Path does not exist or is not a directory: {root}")

    if not args.no_banner:
        print(BANNER)

    days = args.days
    if days is None:
        days = read_threshold(read, max_days=args.max_days)
        if days is Signal.ABORT:
            return _abort()

    if root is None:
        chosen = read_directory_path(read)
        if chosen is Signal.ABORT:
            return _abort()
        root = chosen.resolve()

    scan = scan_directory(root)
    cutoff = compute_cutoff(date.today(), days)
    print(f"Files on or after date '{cutoff.isoformat()}' will be deleted.")
    candidates = filter_by_age(scan, cutoff)

    if not candidates:
        print(NOTHING_TO_DELETE)
        return 0

    if args.dry_run:
        present_candidates(candidates)
        print(DRY_RUN_DONE)
        return 0

    if args.yes:
        present_candidates(candidates)
        confirmed: bool | Signal = True
    else:
        confirmed = present_and_confirm(candidates, read)

    if confirmed is Signal.ABORT:
        return _abort()
    if not confirmed:
        print(DECLINED)
        return 1

    delete_all(candidates)
    return 0


def _abort() -> int:
    print(FAREWELL)
    return 1


def _non_negative_int(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if days < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {days}")
    return days


if __name__ == "__main__":
    raise SystemExit(main())
