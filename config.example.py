# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todolist).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "TODO_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/todolist.log (default: true).",
    # Console
    "TODO_SHOW_TIMESTAMPS": "Prefix console output with local time (default: true).",
    "TODO_INITIAL_FILTER": "Filter at startup: all | active | done (default: all).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for logs (default: .local/todolist).",
}
