from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file explicitly
ENV_FILE_NAME = ".env"
load_dotenv(Path.cwd() / ENV_FILE_NAME, override=False)


class Settings(BaseSettings):
    STORAGE_LOCATION: str = "."
    SOLUTION_PATH: str = ""
    PROJECT_NAME: str = "default"
    DEBUG: bool = False
    LOG_FILE: bool = False
    LOG_DIR: str = "logs"

    @field_validator("STORAGE_LOCATION")
    @classmethod
    def storage_location_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("STORAGE_LOCATION must not be blank")
        return v

    model_config = SettingsConfigDict(
        env_prefix="PROPSYNC_",
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
