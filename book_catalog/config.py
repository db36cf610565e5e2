import os
import secrets

# --- Config ---
BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Startup configuration, read from BOOKCAT_* environment variables."""

    MONGO_URI = os.environ.get('BOOKCAT_MONGO_URI') or "mongodb://localhost:27017"
    MONGO_DB_NAME = os.environ.get('BOOKCAT_DB_NAME') or "exercise-1"
    MONGO_COLLECTION = os.environ.get('BOOKCAT_COLLECTION') or "information"
    MONGO_TIMEOUT_MS = int(os.environ.get('BOOKCAT_MONGO_TIMEOUT_MS') or 10000)

    HOST = os.environ.get('BOOKCAT_HOST') or "0.0.0.0"
    PORT = int(os.environ.get('BOOKCAT_PORT') or 3030)

    TEMPLATE_FOLDER = os.environ.get('BOOKCAT_TEMPLATES') or os.path.join(BASE_DIR, 'templates')
    STATIC_FOLDER = os.environ.get('BOOKCAT_STATIC') or os.path.join(BASE_DIR, 'css')

    SECRET_KEY = os.environ.get('BOOKCAT_SECRET') or secrets.token_hex(32)
    FORCE_HTTPS = env_flag('BOOKCAT_FORCE_HTTPS')

    LOG_LEVEL = os.environ.get('BOOKCAT_LOG_LEVEL') or "INFO"
    LOG_FILE = os.environ.get('BOOKCAT_LOG_FILE')
    MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
    BACKUP_COUNT = 3

    SEED_ON_STARTUP = env_flag('BOOKCAT_SEED', default=True)
