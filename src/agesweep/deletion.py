from __future__ import annotations

import logging
from pathlib import Path

from agesweep.models import CandidateSet, DeletionReport
from agesweep.prompts import CONFIRM_PROMPT, Reader, Signal, read_yes_no

logger = logging.getLogger(__name__)

LISTING_HEADER = "Valid deletable files :"
WARNING_LINE = "WARNING ALL REPORTED FILES WILL BE DELETED!"
DONE_LINE = "POOF! Files have been deleted."


def render_candidates(candidates: CandidateSet) -> list[str]:
    return [
        f"File: {path}\tDate: {created.isoformat()}"
        for path, created in sorted(candidates.items())
    ]


def present_candidates(candidates: CandidateSet) -> None:
    print()
    print(LISTING_HEADER)
    for line in render_candidates(candidates):
        print(line)
    print()
    print(WARNING_LINE)


def present_and_confirm(candidates: CandidateSet, read: Reader = input) -> bool | Signal:
    present_candidates(candidates)
    return read_yes_no(CONFIRM_PROMPT, read)


def delete_all(candidates: CandidateSet) -> DeletionReport:
    """Delete every candidate, carrying on past individual failures."""
    deleted: list[str] = []
    failed: dict[str, str] = {}
    for path in sorted(candidates):
        try:
            Path(path).unlink()
        except OSError as exc:
            logger.error("Could not delete %s: %s", path, exc)
            failed[path] = str(exc)
            continue
        logger.info("Deleted %s", path)
        deleted.append(path)

    print(DONE_LINE)
    print(f"Deleted {len(deleted)} file(s), {len(failed)} failed.")
    return DeletionReport(deleted=tuple(deleted), failed=failed)
