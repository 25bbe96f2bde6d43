# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a
local .env file). This file exists to make the repo self-documenting even
without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "Program name shown in usage text (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASK_TRACKER_LOG_TO_FILE": "Also write DEBUG logs to <data_dir>/task-tracker.log (true/false).",
    # Paths
    "TASK_TRACKER_DATA_DIR": "Local data directory (default: ./config).",
    "TASK_TRACKER_TASKS_FILE": "Task list JSON path (default: <data_dir>/task_list.json).",
}
