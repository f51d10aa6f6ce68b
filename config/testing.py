import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gym_checkin_test"),
    "pool_size": 2,
}

ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SCANNER_CAMERA_INDEX = 0
SCANNER_TIMEOUT_SECONDS = 5.0

NEW_MEMBER_DAYS = 7
EXPIRY_WARNING_DAYS = 7
LOW_SESSION_LIMIT = 5

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
