import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()

TIMEZONE = Config.TIMEZONE
NEGATIVE_DURATION_POLICY = Config.NEGATIVE_DURATION_POLICY
NOTIFICATION_KEEPALIVE_SECONDS = Config.NOTIFICATION_KEEPALIVE_SECONDS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB
