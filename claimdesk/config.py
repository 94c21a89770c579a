import os
from functools import lru_cache

from dotenv import load_dotenv, find_dotenv

# Load environment variables from a .env file found from the working directory
_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path, override=False)


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL")
    # Sender account for outbound notices
    MAIL_FROM: str = os.getenv("MAIL_FROM")
    MAIL_PASSWORD: str = os.getenv("MAIL_PASSWORD")
    SMTP_SERVER: str = os.getenv("SMTP_SERVER", "smtp.gmail.com")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "587"))
    SMTP_TIMEOUT: int = int(os.getenv("SMTP_TIMEOUT", "20"))
    EMAIL_BACKEND: str = os.getenv("EMAIL_BACKEND", "console").lower()
    # Feature flag for sending notification emails
    ENABLE_EMAIL_NOTIFICATIONS: bool = bool(int(os.getenv("ENABLE_EMAIL_NOTIFICATIONS", "1")))
    NOTIFY_MAX_ATTEMPTS: int = max(1, int(os.getenv("NOTIFY_MAX_ATTEMPTS", "3")))
    # Comma separated list; empty means allow all
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "")
    # Directory holding the built client (index.html and assets)
    CLIENT_DIST_DIR: str = os.getenv("CLIENT_DIST_DIR", os.path.join(os.path.dirname(__file__), "web"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]


@lru_cache
def get_settings():
    return Settings()
