from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import date, datetime, timezone
from pathlib import Path

from agesweep.models import FileRecord, ScanResult

logger = logging.getLogger(__name__)

CreationTime = Callable[[Path], datetime]


def file_creation_time(path: Path) -> datetime:
    """Creation time of ``path`` as an aware UTC datetime.

    ``st_birthtime`` is used where the platform records it. Elsewhere the
    last modification time stands in for it, so a ``chmod`` or rename does
    not make an old file look new.
    """
    stat = path.stat()
    timestamp = getattr(stat, "st_birthtime", None)
    if timestamp is None:
        timestamp = stat.st_mtime
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def creation_date(timestamp: datetime) -> date:
    # Date as encoded in the timestamp's own zone, never shifted to local time.
    return timestamp.date()


def scan_directory(path: Path, creation_time: CreationTime | None = None) -> ScanResult:
    read_time = creation_time or file_creation_time
    root = Path(path).resolve()
    result: ScanResult = {}
    try:
        with os.scandir(root) as entries:
            for entry in entries:
                record = _read_entry(entry, read_time)
                if record is not None:
                    result[record.path] = record.created
    except OSError as exc:
        logger.error("Could not list %s: %s", root, exc)
    return result


def _read_entry(entry: os.DirEntry[str], read_time: CreationTime) -> FileRecord | None:
    try:
        # Directories, FIFOs, sockets and device nodes are never candidates.
        if not entry.is_file():
            return None
        created = creation_date(read_time(Path(entry.path)))
    except OSError as exc:
        logger.warning("Skipping %s: %s", entry.path, exc)
        return None
    return FileRecord(path=entry.path, created=created)
