from __future__ import annotations

from dataclasses import dataclass
from datetime import date

ScanResult = dict[str, date]
CandidateSet = dict[str, date]


@dataclass(frozen=True)
class FileRecord:
    path: str  # absolute
    created: date


@dataclass(frozen=True)
class DeletionReport:
    deleted: tuple[str, ...]
    failed: dict[str, str]  # path -> error text
