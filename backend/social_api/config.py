"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
DEFAULT_DB_URL = f"sqlite:///{BASE / 'social.db'}"


class Settings:
    ENV: str
    DATABASE_URL: str
    DB_ECHO: bool
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    HOST: str
    PORT: int

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", "").strip() or DEFAULT_DB_URL
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = int(os.getenv("PORT", "8080"))
        self._validate()

    def _validate(self):
        if self.ENV != "dev" and self.DATABASE_URL == DEFAULT_DB_URL:
            raise RuntimeError("DATABASE_URL must be set explicitly in non-dev environments")


settings = Settings()
