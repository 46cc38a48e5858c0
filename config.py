import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    DB_CONNECT_TIMEOUT_SECONDS = data.get("DB_CONNECT_TIMEOUT_SECONDS", 10)
    QUERY_TIMEOUT_SECONDS = data.get("QUERY_TIMEOUT_SECONDS", 10)
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Report caching (seconds)
    STATS_CACHE_TTL_SECONDS = data.get("STATS_CACHE_TTL_SECONDS", 300)
    STATS_CACHE_MAX_ENTRIES = data.get("STATS_CACHE_MAX_ENTRIES", 12)
    STATUS_CACHE_TTL_SECONDS = data.get("STATUS_CACHE_TTL_SECONDS", 120)
    MONTHLY_REVENUE_CACHE_TTL_SECONDS = data.get("MONTHLY_REVENUE_CACHE_TTL_SECONDS", 300)
    MONTHLY_REVENUE_CACHE_MAX_ENTRIES = data.get("MONTHLY_REVENUE_CACHE_MAX_ENTRIES", 24)
