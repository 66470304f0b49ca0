# src/todolist/cli/commands.py

"""
Command parsing for the console.

Every input line maps to exactly one command value; parsing never raises.
Only the keyword is case-insensitive, the text after `add` keeps its casing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Ids are 32-bit unsigned on the wire; anything larger is rejected as invalid.
MAX_TASK_ID = 2**32 - 1

_UNSIGNED_RE = re.compile(r"[0-9]+")

INVALID_ID_REASON = "not a number"


@dataclass(frozen=True, slots=True)
class Add:
    text: str


@dataclass(frozen=True, slots=True)
class ListTasks:
    pass


@dataclass(frozen=True, slots=True)
class Complete:
    task_id: int


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Invalid:
    reason: str


@dataclass(frozen=True, slots=True)
class Unknown:
    line: str


Command = Add | ListTasks | Complete | Quit | Invalid | Unknown

# Accepted verbs with their usage, in the order shown to the user.
VERB_USAGE: dict[str, str] = {
    "add": "add [task]",
    "list": "list",
    "done": "done [id]",
    "quit": "quit",
}


def build_help() -> str:
    return " / ".join(VERB_USAGE.values())


def parse_task_id(raw: str) -> int | None:
    """Parse an unsigned decimal id. Returns None if `raw` is not one."""
    raw = raw.strip()
    if not _UNSIGNED_RE.fullmatch(raw):
        return None
    # int() refuses very long digit strings, so bound the length first.
    if len(raw.lstrip("0")) > len(str(MAX_TASK_ID)):
        return None
    value = int(raw)
    if value > MAX_TASK_ID:
        return None
    return value


def parse_command(line: str) -> Command:
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return Unknown(line=line)

    name = parts[0].lower()
    rest = parts[1].strip() if len(parts) > 1 else ""

    if name == "quit":
        return Quit()

    if name == "list":
        return ListTasks()

    if name == "add":
        return Add(text=rest)

    if name == "done":
        task_id = parse_task_id(rest)
        if task_id is None:
            return Invalid(reason=INVALID_ID_REASON)
        return Complete(task_id=task_id)

    return Unknown(line=line)
