import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "absensi"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Used until the organisation timezone setting is read (and when it is invalid).
DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "Asia/Jakarta")
TIMEZONE_CACHE_TTL_SECONDS = int(os.getenv("TIMEZONE_CACHE_TTL_SECONDS", "300"))
LEAVE_BADGE_TTL_SECONDS = int(os.getenv("LEAVE_BADGE_TTL_SECONDS", "60"))
