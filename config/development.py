from .config import Config, env_flag, env_list

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()

DEBUG = True
LOG_LEVEL = "DEBUG"
API_PREFIX = Config.API_PREFIX
# Local Vite dev server
CORS_ORIGINS = env_list("CORS_ORIGINS", "http://localhost:5173")

ALLOW_STATUS_OVERWRITE = Config.ALLOW_STATUS_OVERWRITE
REJECT_PAST_DATES = Config.REJECT_PAST_DATES
REQUIRE_PRINCIPAL = Config.REQUIRE_PRINCIPAL

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
