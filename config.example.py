# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "BOB_APP_NAME": "Name the assistant introduces itself with (default: Bob).",
    "BOB_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "BOB_DATA_DIR": "Local data directory (default: .local/bob).",
    "BOB_TASKS_PATH": "Tasks file (default: <data_dir>/tasks.txt). --data-file overrides it.",
    "BOB_LOG_DIR": "Directory for bob.log (default: <data_dir>).",
}
