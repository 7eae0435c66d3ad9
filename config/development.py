import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/storage.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled with the mysql backend, the kv_store table is created on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Populate default users, teacher and classes into empty collections on startup
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "1")))
