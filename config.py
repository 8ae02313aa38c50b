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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./capacity.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_MINUTES = int(data.get("ACCESS_TOKEN_MINUTES", 15))
    ATTENDEE_CATEGORIES = data.get(
        "ATTENDEE_CATEGORIES", ["VIP", "Partner", "Exhibitor", "Media"]
    )
    # "advisory" lets over-capacity through with a warning, "strict" denies it
    CAPACITY_POLICY = data.get("CAPACITY_POLICY", "advisory")
    MAX_SLOTS_PER_CATEGORY = int(data.get("MAX_SLOTS_PER_CATEGORY", 200))
    NOTIFICATION_WEBHOOK_URL = data.get("NOTIFICATION_WEBHOOK_URL", "")
    NOTIFICATION_TIMEOUT_SECONDS = float(data.get("NOTIFICATION_TIMEOUT_SECONDS", 5.0))
