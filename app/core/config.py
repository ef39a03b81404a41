# File: app/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# .env is read before any Settings instance is built
load_dotenv()


class Settings(BaseModel):
    # env-derived defaults go through the validators below
    model_config = ConfigDict(validate_default=True)

    PROJECT_NAME: str = "my-todo"
    VERSION: str = "0.1.0"

    # Server
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "6178"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "info")

    # CORS
    cors_origins: List[str] = os.getenv("CORS_ORIGINS", "http://localhost:3001")

    # Database
    database_url: Optional[str] = os.getenv("DATABASE_URL") or None

    # Tests that need a running Postgres
    database_test: bool = os.getenv("DATABASE_TEST", "1")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("database_url", mode="before")
    @classmethod
    def normalize_database_url(cls, v):
        # sqlx-style URLs point at the psycopg driver
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return "postgresql+psycopg://" + v[len(prefix):]
        return v

    def require_database_url(self) -> str:
        if not self.database_url:
            raise RuntimeError("undefined [DATABASE_URL]")
        return self.database_url


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
