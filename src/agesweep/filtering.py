from __future__ import annotations

from datetime import date, timedelta

from agesweep.models import CandidateSet, ScanResult


def compute_cutoff(today: date, threshold_days: int) -> date:
    if threshold_days < 0:
        raise ValueError(f"threshold_days must be >= 0, got {threshold_days}")
    try:
        return today - timedelta(days=threshold_days)
    except OverflowError:
        # Further back than the calendar goes; nothing can be that old.
        return date.min


def filter_by_age(scan_result: ScanResult, cutoff: date) -> CandidateSet:
    """Return the files created on or before ``cutoff``."""
    return {path: created for path, created in scan_result.items() if created <= cutoff}
