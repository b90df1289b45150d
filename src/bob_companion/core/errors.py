# src/bob_companion/core/errors.py

"""
User-facing error taxonomy.

Every error here is recoverable: the command registry converts it into a failed
CommandResult and the console loop keeps going.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_TASK_NUMBER = "invalid_task_number"
    INVALID_DATE_FORMAT = "invalid_date_format"
    EMPTY_KEYWORD = "empty_keyword"
    MISSING_ARGUMENT = "missing_argument"
    MALFORMED_COMMAND = "malformed_command"
    PAST_DATE_REJECTED = "past_date_rejected"
    INVALID_RANGE = "invalid_range"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    LOAD_ERROR = "load_error"
    SAVE_ERROR = "save_error"
    UNEXPECTED = "unexpected"


class BobError(Exception):
    """Base class for every error shown to the user."""

    kind: ErrorKind = ErrorKind.UNEXPECTED
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTaskNumber(BobError):
    kind = ErrorKind.INVALID_TASK_NUMBER
    default_message = "The task number provided is invalid."


class InvalidDateFormat(BobError):
    kind = ErrorKind.INVALID_DATE_FORMAT

    def __init__(self, value: str, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid date '{value}'. Please use the format {expected}.")


class EmptyKeyword(BobError):
    kind = ErrorKind.EMPTY_KEYWORD
    default_message = "Please provide a keyword or a phrase."


class MissingArgument(BobError):
    kind = ErrorKind.MISSING_ARGUMENT
    default_message = "Missing details!"


class MalformedCommand(BobError):
    kind = ErrorKind.MALFORMED_COMMAND
    default_message = "You may have missing details or wrong format!"


class PastDateRejected(BobError):
    kind = ErrorKind.PAST_DATE_REJECTED
    default_message = "Oops! The date you provided is in the past. Kindly provide a future date."


class InvalidRange(BobError):
    kind = ErrorKind.INVALID_RANGE
    default_message = "The end date cannot be before the start date. Please try again."


class UnrecognizedCommand(BobError):
    kind = ErrorKind.UNRECOGNIZED_COMMAND
    default_message = "Sorry, I do not understand. Type 'help' to see what I can do."


class LoadError(BobError):
    kind = ErrorKind.LOAD_ERROR
    default_message = "Could not load saved tasks."


class SaveError(BobError):
    kind = ErrorKind.SAVE_ERROR
    default_message = "Could not save tasks."


class UnexpectedError(BobError):
    """Wraps a non-domain exception; the original message is preserved."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, original: BaseException) -> None:
        self.original = original
        super().__init__(f"An unexpected error occurred: {original}")
