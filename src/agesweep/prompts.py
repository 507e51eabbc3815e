from __future__ import annotations

import enum
from collections.abc import Callable
from pathlib import Path

Reader = Callable[[str], str]

THRESHOLD_PROMPT = "How far should we go back, in days: "
DIRECTORY_PROMPT = "Where's your Desktop located (/path/to/desktop): "
DIRECTORY_RETRY_PROMPT = "Oops! This doesn't seem to be a valid Directory, try again[q/quit]: "
CONFIRM_PROMPT = "Continue? (yes / no) - q[quit]: "
CONFIRM_RETRY_PROMPT = "Please choose an option. (yes / no) - q[quit]: "

QUIT_TOKENS = frozenset({"q", "quit"})
YES_TOKENS = frozenset({"yes", "y"})
NO_TOKENS = frozenset({"no", "n"})


class Signal(enum.Enum):
    ABORT = "abort"


def is_quit(answer: str) -> bool:
    return answer.strip().lower() in QUIT_TOKENS


def read_threshold(read: Reader = input, max_days: int | None = None) -> int | Signal:
    """Ask how many days back to go until a usable number is entered.

    Only negative and non-numeric answers are rejected unless ``max_days``
    is given; the suggested 0-365 range is a hint, not a rule.
    """
    upper = "365" if max_days is None else str(max_days)
    while True:
        answer = _ask(read, THRESHOLD_PROMPT)
        if answer is None or is_quit(answer):
            return Signal.ABORT
        days = _parse_days(answer)
        if days is not None and (max_days is None or days <= max_days):
            return days
        print(f"Oops! Invalid numeric value[0-{upper}], try again.")


def read_directory_path(read: Reader = input) -> Path | Signal:
    prompt = DIRECTORY_PROMPT
    while True:
        answer = _ask(read, prompt)
        if answer is None or is_quit(answer):
            return Signal.ABORT
        if answer:
            path = Path(answer).expanduser()
            if path.is_dir():
                return path
        prompt = DIRECTORY_RETRY_PROMPT


def read_yes_no(prompt: str, read: Reader = input) -> bool | Signal:
    while True:
        answer = _ask(read, prompt)
        if answer is None or is_quit(answer):
            return Signal.ABORT
        token = answer.lower()
        if token in YES_TOKENS:
            return True
        if token in NO_TOKENS:
            return False
        prompt = CONFIRM_RETRY_PROMPT


def _ask(read: Reader, prompt: str) -> str | None:
    # None means stdin is exhausted, which callers treat like quitting.
    try:
        return read(prompt).strip()
    except EOFError:
        return None


def _parse_days(answer: str) -> int | None:
    try:
        days = int(answer)
    except ValueError:
        return None
    return days if days >= 0 else None
