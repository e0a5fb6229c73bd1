from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    TELEGRAM_API_ID: int
    TELEGRAM_API_HASH: str

    TELEGRAM_SESSION: str = ""
    TELEGRAM_SESSION_FILE: str | None = None

    TELEGRAM_DIALOGS_LIMIT: int = 100
    TELEGRAM_CONNECTION_RETRIES: int = 5

    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()  # type: ignore[call-arg]
