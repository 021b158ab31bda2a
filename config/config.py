import os


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.environ.get(name, default)))


def env_list(name: str, default: str) -> list:
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "vacation-dev-secret"

    # DB settings
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "vacation_db")

    API_PREFIX = os.environ.get("API_PREFIX", "/api")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Lifecycle rules
    ALLOW_STATUS_OVERWRITE = env_flag("ALLOW_STATUS_OVERWRITE", "0")
    REJECT_PAST_DATES = env_flag("REJECT_PAST_DATES", "1")
    REQUIRE_PRINCIPAL = env_flag("REQUIRE_PRINCIPAL", "0")

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
