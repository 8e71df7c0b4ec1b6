"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SNAPSHOT_STORAGE_KEY = "bizTimeTrackerData"
SESSION_STORAGE_KEY = "loggedInUserId"

DEFAULT_STORAGE_PATH = "instance/storage.json"
DEFAULT_TOP_TASKS = 10

USER_ID_PREFIX = "user"
PROJECT_ID_PREFIX = "proj"
TASK_ID_PREFIX = "task"
TIME_LOG_ID_PREFIX = "log"
