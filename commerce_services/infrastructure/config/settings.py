from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite+aiosqlite:///./commerce.db"
    STORAGE_BACKEND: Literal["sqlalchemy", "memory"] = "sqlalchemy"
    SQL_ECHO: bool = False
