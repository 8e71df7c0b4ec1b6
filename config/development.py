import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# file | memory | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/storage.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_tracker"),
}

# plain | werkzeug
PASSWORD_SCHEME = os.getenv("PASSWORD_SCHEME", "plain")

DEBUG = True

# If enabled (mysql backend), create the database and storage table on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
