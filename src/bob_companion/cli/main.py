# src/bob_companion/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Session, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from ..cli.bootstrap import create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="bob",
    help="Bob - a small task-tracking assistant for the terminal.",
    add_completion=False,
)


@app.command()
def run(
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-f",
        help="Tasks file to load and save (or set BOB_TASKS_PATH).",
        dir_okay=False,
    ),
) -> None:
    """Start an interactive session. Type 'help' inside for the commands."""
    settings = get_settings().with_tasks_path(data_file)

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s with tasks file %s", settings.app_name, settings.tasks_path)

    session = create_session(settings=settings)
    run_console_loop(session)

    logger.info("Bye.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
