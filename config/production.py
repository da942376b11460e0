import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timecard_db"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

OVERTIME_SNAP_MINUTES = int(os.getenv("OVERTIME_SNAP_MINUTES", "30"))
PERMESSO_SNAP_MINUTES = int(os.getenv("PERMESSO_SNAP_MINUTES", "15"))
IMPLICIT_PERMISSION_HOURS = bool(int(os.getenv("IMPLICIT_PERMISSION_HOURS", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
JSON_LOGS = bool(int(os.getenv("JSON_LOGS", "1")))
