import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./authcord.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    ENV = data.get("ENV", "development")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    SESSION_SECRET = data.get("SESSION_SECRET", "dev-secret-key-change-in-production")
    BROWSER_SESSION_TTL_MINUTES = int(data.get("BROWSER_SESSION_TTL_MINUTES", 60 * 24))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    REQUIRE_MEMBER_FOR_REDIRECT = bool(data.get("REQUIRE_MEMBER_FOR_REDIRECT", False))
    FORWARDED_FOR_HEADER = data.get("FORWARDED_FOR_HEADER", "x-forwarded-for")
    MAX_SESSIONS_PER_USER = int(data.get("MAX_SESSIONS_PER_USER", 5))
    MAX_IPS_PER_USER = int(data.get("MAX_IPS_PER_USER", 2))
    CODE_LENGTH = int(data.get("CODE_LENGTH", 5))
