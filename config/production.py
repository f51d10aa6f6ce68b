import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gym_checkin"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
}

ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SCANNER_CAMERA_INDEX = int(os.getenv("SCANNER_CAMERA_INDEX", "0"))
SCANNER_TIMEOUT_SECONDS = float(os.getenv("SCANNER_TIMEOUT_SECONDS", "30"))

NEW_MEMBER_DAYS = int(os.getenv("NEW_MEMBER_DAYS", "7"))
EXPIRY_WARNING_DAYS = int(os.getenv("EXPIRY_WARNING_DAYS", "7"))
LOW_SESSION_LIMIT = int(os.getenv("LOW_SESSION_LIMIT", "5"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
