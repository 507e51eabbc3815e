from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path

import pytest

from agesweep import scanner


def days_ago(days: int) -> datetime:
    return datetime.combine(date.today() - timedelta(days=days), time(12), tzinfo=timezone.utc)


@pytest.fixture
def creation_ages(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, int]], None]:
    """Make files report a creation date ``ages[name]`` days before today."""

    def install(ages: dict[str, int]) -> None:
        def fake(path: Path) -> datetime:
            if path.name not in ages:
                raise PermissionError(13, "Permission denied", str(path))
            return days_ago(ages[path.name])

        monkeypatch.setattr(scanner, "file_creation_time", fake)

    return install


@pytest.fixture
def scripted() -> Callable[..., Callable[[str], str]]:
    """Build a ``read`` callable that replays answers, then hits end of input."""

    def build(*answers: str) -> Callable[[str], str]:
        remaining: Iterator[str] = iter(answers)

        def read(prompt: str) -> str:
            print(prompt, end="")
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read

    return build
