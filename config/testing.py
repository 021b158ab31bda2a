from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = Config.db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
API_PREFIX = "/api"
CORS_ORIGINS = ["http://localhost:5173"]

ALLOW_STATUS_OVERWRITE = False
REJECT_PAST_DATES = False
REQUIRE_PRINCIPAL = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
