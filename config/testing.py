import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_PATH = None

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_tracker_test"),
}

PASSWORD_SCHEME = "plain"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
