# src/bob_companion/core/parser.py

"""
Command-line parsing.

Turns one raw input line into (Command, details) and parses the fixed date/date-time
patterns used by task commands. Date helpers raise InvalidDateFormat; nothing else here
can fail.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from .errors import InvalidDateFormat

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H%M"

# Shown to users in error messages.
DATE_PATTERN = "YYYY-MM-DD"
DATETIME_PATTERN = "YYYY-MM-DD HHmm"

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")


class Command(StrEnum):
    EXIT = "bye"
    LIST = "list"
    FILTER_BY_DATE = "relevant"
    MARK = "mark"
    UNMARK = "unmark"
    ADD_TODO = "todo"
    ADD_DEADLINE = "deadline"
    ADD_EVENT = "event"
    DELETE = "delete"
    FIND = "find"
    SORT = "sort"
    HELP = "help"
    UNKNOWN = ""

    @classmethod
    def from_keyword(cls, word: str) -> Command:
        # Case-sensitive, exact match; the empty keyword is never a real command.
        if not word:
            return cls.UNKNOWN
        try:
            return cls(word)
        except ValueError:
            return cls.UNKNOWN


@dataclass(slots=True, frozen=True)
class ParsedCommand:
    command: Command
    details: str


def parse_command(line: str) -> ParsedCommand:
    text = (line or "").strip()
    parts = text.split(None, 1)
    head = parts[0] if parts else ""
    rest = parts[1] if len(parts) > 1 else ""
    command = Command.from_keyword(head)
    if command is Command.UNKNOWN:
        return ParsedCommand(command, text)
    return ParsedCommand(command, rest.strip())


def parse_date(text: str) -> date:
    """Parse 'YYYY-MM-DD' (zero-padded) into a date."""
    raw = (text or "").strip()
    if not _DATE_RE.fullmatch(raw):
        raise InvalidDateFormat(raw, DATE_PATTERN)
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(raw, DATE_PATTERN) from None


def parse_datetime(text: str) -> datetime:
    """Parse 'YYYY-MM-DD HHmm' (24-hour clock, zero-padded) into a naive local datetime."""
    raw = (text or "").strip()
    if not _DATETIME_RE.fullmatch(raw):
        raise InvalidDateFormat(raw, DATETIME_PATTERN)
    try:
        return datetime.strptime(raw, DATETIME_FORMAT)
    except ValueError:
        raise InvalidDateFormat(raw, DATETIME_PATTERN) from None


def format_datetime(dt: datetime) -> str:
    """Inverse of parse_datetime."""
    return dt.strftime(DATETIME_FORMAT)
