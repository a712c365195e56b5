from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Employee Directory API"
    API_PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./employees.db"

    # preload the two demo employees on an empty table
    SEED_DEMO_DATA: bool = True

    BACKEND_CORS_ORIGINS: List[str] = []

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        # hosted postgres URLs come without a driver
        if isinstance(v, str):
            if v.startswith("postgresql://"):
                return "postgresql+psycopg://" + v[len("postgresql://"):]
            if v.startswith("postgres://"):
                return "postgresql+psycopg://" + v[len("postgres://"):]
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
