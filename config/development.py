import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timecard_db"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Defaults until an operator saves its own values (app_settings table)
OVERTIME_SNAP_MINUTES = int(os.getenv("OVERTIME_SNAP_MINUTES", "30"))
PERMESSO_SNAP_MINUTES = int(os.getenv("PERMESSO_SNAP_MINUTES", "15"))
# Unjustified short days accrue permission-hours
IMPLICIT_PERMISSION_HOURS = bool(int(os.getenv("IMPLICIT_PERMISSION_HOURS", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
JSON_LOGS = bool(int(os.getenv("JSON_LOGS", "0")))
