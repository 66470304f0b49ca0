# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening the README.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in logs (default: todolist).",
    "TODO_LOG_LEVEL": "Console log level on stderr (default: WARNING).",
    "TODO_LOG_DIR": "Directory for todolist.log with DEBUG logs (default: unset, no file).",
    # Console
    "TODO_PROMPT": "Prompt shown before each read when stdin is a terminal (default: '> ').",
    "TODO_BANNER": "Show the startup banner on a terminal (true/false, default: true).",
}
