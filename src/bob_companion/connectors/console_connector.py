# src/bob_companion/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry, Outcome
from ..cli.commands import registry as command_registry
from ..core.errors import BobError
from ..core.state import Session

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


class ConsoleUi:
    """stdin/stdout user interface. Every reply is framed by divider lines."""

    def __init__(
        self,
        app_name: str = "Bob",
        *,
        prompt: str = "> ",
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._app_name = app_name
        self._prompt = prompt
        self._read = read
        self._write = write

    def _framed(self, text: str) -> None:
        self._write(DIVIDER)
        for line in text.splitlines() or [""]:
            self._write(f" {line}")
        self._write(DIVIDER)

    def read_command(self) -> str:
        return self._read(self._prompt)

    def show_welcome(self) -> None:
        self._framed(
            f"Hello! I'm {self._app_name}.\n"
            "What can I do for you? Type 'help' to see the commands."
        )

    def show_goodbye(self) -> None:
        self._framed("Bye. Hope to see you again soon!")

    def show_message(self, text: str) -> None:
        self._framed(text)

    def show_error(self, err: BobError) -> None:
        self._framed(f"OOPS!!! {err.message}")

    def show_no_tasks(self) -> None:
        self._framed("There are no tasks in your list yet.")

    def show_loading_success(self) -> None:
        self._framed("Your saved tasks were loaded successfully.")


def run_console_loop(session: Session, registry: CommandRegistry | None = None) -> None:
    """
    Read-execute-show until 'bye', EOF or Ctrl-C.

    A failing command never ends the loop; it is reported and the next line is read.
    """
    registry = registry or command_registry
    ui = session.ui

    logger.info("Console connector started (tasks=%d).", session.task_list.count())
    ui.show_welcome()

    while True:
        try:
            line = ui.read_command()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            ui.show_goodbye()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            ui.show_goodbye()
            break

        if not line.strip():
            continue

        result = registry.execute(session, line)

        if result.outcome is Outcome.EXIT:
            logger.info("Console exit command received.")
            ui.show_goodbye()
            break
        if result.outcome is Outcome.NO_TASKS:
            ui.show_no_tasks()
        elif result.error is not None:
            ui.show_error(result.error)
        else:
            ui.show_message(result.text)

    logger.info("Console connector finished.")
