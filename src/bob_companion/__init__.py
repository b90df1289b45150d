"""Bob: a single-user task-tracking assistant for the terminal."""

__version__ = "0.1.0"
