"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    ENV: str
    DATABASE_URL: str
    SQL_ECHO: bool
    CORS_ORIGIN: str
    DEFAULT_USER_ID: str
    LOG_LEVEL: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'app.db'}")
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        # Vite dev server of the front-end
        self.CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:5000")
        self.DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID", "demo-user-id")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self._validate()

    def _validate(self):
        if not self.DATABASE_URL.strip():
            raise RuntimeError("DATABASE_URL must not be empty")
        if not self.DEFAULT_USER_ID.strip():
            raise RuntimeError("DEFAULT_USER_ID must not be empty")


settings = Settings()
