import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()

TIMEZONE = Config.TIMEZONE
NEGATIVE_DURATION_POLICY = Config.NEGATIVE_DURATION_POLICY
NOTIFICATION_KEEPALIVE_SECONDS = Config.NOTIFICATION_KEEPALIVE_SECONDS

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
