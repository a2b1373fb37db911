import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "hr_attendance")

    # One fixed zone for day boundaries and display.
    TIMEZONE = os.environ.get("TIMEZONE", "Asia/Kolkata")
    # "absent" keeps negative durations as Absent, "reject" answers 400.
    NEGATIVE_DURATION_POLICY = os.environ.get("NEGATIVE_DURATION_POLICY", "absent")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    NOTIFICATION_KEEPALIVE_SECONDS = int(os.environ.get("NOTIFICATION_KEEPALIVE_SECONDS", "15"))

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
    AUTO_SEED_DB = bool(int(os.environ.get("AUTO_SEED_DB", "0")))

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
