import os

from .config import Config, env_flag, env_list

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
API_PREFIX = Config.API_PREFIX
CORS_ORIGINS = env_list("CORS_ORIGINS", "https://vacations.example.com")

ALLOW_STATUS_OVERWRITE = Config.ALLOW_STATUS_OVERWRITE
REJECT_PAST_DATES = Config.REJECT_PAST_DATES
REQUIRE_PRINCIPAL = env_flag("REQUIRE_PRINCIPAL", "1")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
