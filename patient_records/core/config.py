from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Literal

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    APP_NAME: str = "patient-records"
    ENV: Literal["local", "dev", "prod"] = "local"
    API_PREFIX: str = ""

    # DB
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/patients.db"
    DB_MANAGE: Literal["create_all", "none"] = "create_all"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @field_validator("DATABASE_URL")
    @classmethod
    def _must_aiosqlite(cls, v: str):
        if not v.startswith("sqlite+aiosqlite:"):
            raise ValueError("DATABASE_URL must use the aiosqlite driver (sqlite+aiosqlite:///...)")
        return v

settings = Settings()
