# src/bob_companion/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import (
    BobError,
    InvalidRange,
    InvalidTaskNumber,
    MalformedCommand,
    MissingArgument,
    PastDateRejected,
    UnexpectedError,
    UnrecognizedCommand,
)
from ..core.parser import Command, parse_command, parse_datetime
from ..core.state import Session
from ..tasks.task_models import Deadline, Event, Task, ToDo

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    MESSAGE = "message"
    NO_TASKS = "no_tasks"
    EXIT = "exit"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class CommandResult:
    """What one command produced. The console loop decides how to show it."""

    outcome: Outcome
    text: str = ""
    error: BobError | None = None

    @classmethod
    def message(cls, text: str) -> CommandResult:
        return cls(Outcome.MESSAGE, text)

    @classmethod
    def failure(cls, error: BobError) -> CommandResult:
        return cls(Outcome.ERROR, error.message, error)

    @property
    def ok(self) -> bool:
        return self.outcome is not Outcome.ERROR


CommandHandler = Callable[[Session, str], CommandResult]


class CommandRegistry:
    """Maps command tags to handlers and turns every failure into a CommandResult."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._help: dict[Command, str] = {}

    def register(self, command: Command, handler: CommandHandler, help_text: str) -> None:
        self._handlers[command] = handler
        self._help[command] = help_text

    def dispatch(self, session: Session, command: Command, details: str) -> CommandResult:
        """Run one handler. Domain errors propagate to the caller."""
        handler = self._handlers.get(command)
        if handler is None:
            raise UnrecognizedCommand()
        return handler(session, details)

    def execute(self, session: Session, line: str) -> CommandResult:
        """
        Parse and run one input line.

        Never raises: BobError becomes a failed result, anything else is logged
        and wrapped into UnexpectedError with the original message kept.
        """
        parsed = parse_command(line)
        logger.debug("Command %s details=%r", parsed.command.name, parsed.details)
        try:
            return self.dispatch(session, parsed.command, parsed.details)
        except BobError as e:
            logger.info("Command %s failed: %s", parsed.command.name, e.kind)
            return CommandResult.failure(e)
        except Exception as e:
            logger.exception("Command handler crashed.")
            return CommandResult.failure(UnexpectedError(e))

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----

_DEADLINE_RE = re.compile(r"^(?P<desc>.*?)\s*/by\s+(?P<by>.+)$")
_EVENT_RE = re.compile(r"^(?P<desc>.*?)\s*/from\s+(?P<start>.+?)\s+/to\s+(?P<end>.+)$")

DEADLINE_USAGE = "deadline <description> /by <YYYY-MM-DD HHmm>"
EVENT_USAGE = "event <description> /from <YYYY-MM-DD HHmm> /to <YYYY-MM-DD HHmm>"

# ASCII digits with an optional minus sign; no "+", "_" or other scripts.
_TASK_NUMBER_RE = re.compile(r"-?[0-9]+")


def _task_number(details: str) -> int:
    if not details:
        raise MissingArgument("Please provide a task number.")
    if not _TASK_NUMBER_RE.fullmatch(details):
        raise InvalidTaskNumber(f"'{details}' is not a valid task number.")
    return int(details)


def _added(session: Session, task: Task, label: str) -> CommandResult:
    session.task_list.add(task)
    session.save()
    logger.info("Added %s task, total=%d", task.kind, session.task_list.count())
    return CommandResult.message(
        f"Adding {label} task:\n {task.render()}\n"
        f"Total number of tasks in your list: {session.task_list.count()}"
    )


# ---- handlers ----


def cmd_exit(session: Session, details: str) -> CommandResult:
    return CommandResult(Outcome.EXIT)


def cmd_list(session: Session, details: str) -> CommandResult:
    if session.task_list.is_empty():
        return CommandResult(Outcome.NO_TASKS)
    return CommandResult.message("Your list of tasks:\n" + session.task_list.render_all())


def cmd_relevant(session: Session, details: str) -> CommandResult:
    if not details:
        raise MissingArgument("Please provide a date in the format YYYY-MM-DD.")
    return CommandResult.message(session.task_list.filter_by_date(details))


def cmd_find(session: Session, details: str) -> CommandResult:
    return CommandResult.message(session.task_list.filter_by_keyword(details))


def cmd_sort(session: Session, details: str) -> CommandResult:
    """
    sort description  -> tasks ordered by description
    sort date         -> dated tasks by time, to-dos last

    Only the view is sorted; stored order and task numbers stay as they are.
    """
    key = details.lower()
    if not key:
        raise MissingArgument("Please choose what to sort by: sort description | sort date")
    if key == "description":
        view = session.task_list.sort_by_description()
    elif key == "date":
        view = session.task_list.sort_by_date()
    else:
        raise MalformedCommand(f"Cannot sort by '{details}'. Use: sort description | sort date")
    if view.is_empty():
        return CommandResult(Outcome.NO_TASKS)
    return CommandResult.message(f"Your tasks sorted by {key}:\n" + view.render_all())


def cmd_mark(session: Session, details: str) -> CommandResult:
    task = session.task_list.get(_task_number(details))
    task.mark_as_done()
    session.save()
    return CommandResult.message("Good Job! Marking this task as done:\n " + task.render())


def cmd_unmark(session: Session, details: str) -> CommandResult:
    task = session.task_list.get(_task_number(details))
    task.mark_as_undone()
    session.save()
    return CommandResult.message("Okay, marking this task as not done yet:\n " + task.render())


def cmd_todo(session: Session, details: str) -> CommandResult:
    if not details:
        raise MissingArgument("Missing details!\nAdd a ToDo task like this:\ntodo <description>")
    return _added(session, ToDo(details), "ToDo")


def cmd_deadline(session: Session, details: str) -> CommandResult:
    if not details:
        raise MissingArgument(f"Missing details!\nAdd a Deadline task like this:\n{DEADLINE_USAGE}")
    m = _DEADLINE_RE.match(details)
    if not m or not m.group("desc").strip():
        raise MalformedCommand(
            f"You may have missing details or wrong format!\n{DEADLINE_USAGE}"
        )

    due = parse_datetime(m.group("by"))
    if due < session.clock():
        raise PastDateRejected()
    return _added(session, Deadline(m.group("desc").strip(), due), "Deadline")


def cmd_event(session: Session, details: str) -> CommandResult:
    if not details:
        raise MissingArgument(f"Missing details!\nAdd an Event task like this:\n{EVENT_USAGE}")
    m = _EVENT_RE.match(details)
    if not m or not m.group("desc").strip():
        raise MalformedCommand(f"You may have missing details or wrong format!\n{EVENT_USAGE}")

    start = parse_datetime(m.group("start"))
    end = parse_datetime(m.group("end"))
    now = session.clock()
    if start < now or end < now:
        raise PastDateRejected()
    if end < start:
        raise InvalidRange()
    return _added(session, Event(m.group("desc").strip(), start, end), "Event")


def cmd_delete(session: Session, details: str) -> CommandResult:
    task_num = _task_number(details)
    task = session.task_list.get(task_num)
    session.task_list.delete(task_num)
    session.save()
    return CommandResult.message(
        f"Noted, removing this task:\n {task.render()}\n"
        f"Total number of tasks in your list: {session.task_list.count()}"
    )


def cmd_help(session: Session, details: str) -> CommandResult:
    return CommandResult.message(registry.build_help())


registry.register(Command.LIST, cmd_list, "list - show all tasks")
registry.register(Command.ADD_TODO, cmd_todo, "todo <description> - add a to-do")
registry.register(Command.ADD_DEADLINE, cmd_deadline, f"{DEADLINE_USAGE} - add a deadline")
registry.register(Command.ADD_EVENT, cmd_event, f"{EVENT_USAGE} - add an event")
registry.register(Command.MARK, cmd_mark, "mark <task number> - mark a task as done")
registry.register(Command.UNMARK, cmd_unmark, "unmark <task number> - mark a task as not done")
registry.register(Command.DELETE, cmd_delete, "delete <task number> - remove a task")
registry.register(Command.FILTER_BY_DATE, cmd_relevant, "relevant <YYYY-MM-DD> - tasks on a date")
registry.register(Command.FIND, cmd_find, "find <keyword> - tasks whose description matches")
registry.register(Command.SORT, cmd_sort, "sort description | sort date - show a sorted view")
registry.register(Command.HELP, cmd_help, "help - show this list")
registry.register(Command.EXIT, cmd_exit, "bye - quit")
